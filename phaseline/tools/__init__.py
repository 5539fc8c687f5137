"""Command-line helpers run as `python -m phaseline.tools.<name>`:

  validate_payload  check a layout payload (JSON file or rendered page)
  render_payload    replay a recorded payload as an HTML page
"""

__all__: list[str] = []
