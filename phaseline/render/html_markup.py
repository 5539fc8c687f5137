# phaseline/render/html_markup.py
from __future__ import annotations

BODY_MARKUP = r"""<div class="app">
  <aside class="list-pane">
    <div class="list-head">
      <span class="title">Projects</span>
      <span class="meta" id="meta"></span>
    </div>
    <div class="list-scroll" id="listScroll">
      <div class="list-body" id="listBody"></div>
    </div>
  </aside>
  <main class="canvas-scroll" id="canvasScroll">
    <div class="canvas" id="canvas">
      <div class="canvas-head" id="canvasHead">
        <div class="months" id="months"></div>
        <div class="weeks" id="weeks"></div>
      </div>
      <div class="canvas-body" id="canvasBody">
        <div class="grid" id="grid"></div>
        <div class="today" id="today"><span class="today-pill" id="todayPill"></span></div>
      </div>
    </div>
  </main>
</div>"""
