# phaseline/render/inline_css.py
from __future__ import annotations

CSS_BLOCK = r"""
:root {
  --bg: #020617;
  --card: #0f172a;
  --border: #1e293b;
  --primary: #26b9f7;
  --today: #f87171;
  --text: #e2e8f0;
  --muted: #64748b;
  --head-h: 64px;
}
* { box-sizing: border-box; }
html, body { margin: 0; height: 100%; background: var(--bg); color: var(--text);
  font: 12px/1.3 system-ui, -apple-system, "Segoe UI", sans-serif; }
.app { display: flex; height: 100vh; overflow: hidden; }

.list-pane { width: 320px; flex: 0 0 320px; display: flex; flex-direction: column;
  background: var(--card); border-right: 1px solid var(--border); }
.list-head { height: var(--head-h); flex: 0 0 var(--head-h); display: flex; align-items: center;
  justify-content: space-between; padding: 0 16px; border-bottom: 1px solid var(--border); }
.list-head .title { font-weight: 800; letter-spacing: .04em; text-transform: uppercase; }
.list-head .meta { color: var(--muted); font-size: 11px; }
.list-scroll { flex: 1; overflow-y: auto; overflow-x: hidden; }
.list-row { border-bottom: 1px solid rgba(30,41,59,.6); padding: 10px 16px; overflow: hidden; }
.list-row .code { font: 10px ui-monospace, monospace; color: var(--primary); }
.list-row .name { font-weight: 700; margin-top: 2px; }
.list-row .tags { margin-top: 4px; display: flex; gap: 4px; flex-wrap: wrap; }
.list-row .tag { border: 1px solid var(--border); border-radius: 999px; padding: 0 6px;
  font-size: 10px; color: var(--muted); }

.canvas-scroll { flex: 1; overflow: auto; position: relative; }
.canvas { position: relative; min-height: 100%; }
.canvas-head { position: sticky; top: 0; z-index: 30; height: var(--head-h); background: var(--bg);
  border-bottom: 1px solid var(--border); }
.months, .weeks { position: relative; height: 50%; }
.months { display: flex; border-bottom: 1px solid rgba(30,41,59,.5); }
.month { flex: 0 0 auto; height: 100%; border-right: 1px solid var(--border); padding: 0 12px;
  display: flex; align-items: center; font-size: 11px; font-weight: 700; }
.week { position: absolute; top: 0; height: 100%; border-right: 1px solid rgba(30,41,59,.3);
  padding: 0 12px; display: flex; align-items: center; font: 10px ui-monospace, monospace; color: var(--muted); }
.canvas-body { position: relative; }
.grid { position: absolute; inset: 0; pointer-events: none; }
.grid .wline { position: absolute; top: 0; bottom: 0; border-right: 1px solid rgba(30,41,59,.15); }
.today { position: absolute; top: 0; bottom: 0; width: 1px; background: rgba(248,113,113,.6);
  z-index: 20; pointer-events: none; }
.today-pill { position: sticky; top: 48px; display: inline-block; transform: translateX(-50%);
  background: var(--today); color: #fff; font-size: 9px; font-weight: 900; padding: 1px 6px; border-radius: 999px; }
.proj-row { position: relative; border-bottom: 1px solid rgba(30,41,59,.2); }
.proj-row svg { position: absolute; inset: 0; pointer-events: none; opacity: .2; overflow: visible; }
.bar { position: absolute; border-radius: 6px; border: 1px solid rgba(255,255,255,.12);
  overflow: hidden; cursor: pointer; display: flex; align-items: center; padding: 0 8px 0 10px; }
.bar .accent { position: absolute; left: 0; top: 0; bottom: 0; width: 4px; }
.bar .fill { position: absolute; left: 0; top: 0; bottom: 0; opacity: .2; }
.bar .txt { position: relative; z-index: 1; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; width: 100%; }
.bar .lbl { font-size: 10px; font-weight: 900; text-transform: uppercase; display: flex; justify-content: space-between; }
.bar .dates { font: 8px ui-monospace, monospace; opacity: .8; }
"""
