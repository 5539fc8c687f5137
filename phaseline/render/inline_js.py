# phaseline/render/inline_js.py
from __future__ import annotations

# Positions are computed in Python (phaseline.geometry); this script only
# places them, mirrors vertical scroll between the panes and centres today.
JS_BLOCK = r"""
(function () {
  "use strict";
  const DATA = JSON.parse(document.getElementById("pl-data").textContent);
  const CFG = DATA.cfg || {};

  function el(tag, cls, style) {
    const n = document.createElement(tag);
    if (cls) n.className = cls;
    if (style) Object.assign(n.style, style);
    return n;
  }
  function px(v) { return String(v) + "px"; }
  function colorOf(kind) {
    const s = (DATA.styles || {})[kind];
    return s ? s.color : (DATA.default_color || "#64748b");
  }

  // --- header --------------------------------------------------------------
  const canvas = document.getElementById("canvas");
  canvas.style.width = px(DATA.width);

  const months = document.getElementById("months");
  for (const m of DATA.header.months) {
    const d = el("div", "month", { width: px(m.width) });
    d.textContent = m.label;
    months.appendChild(d);
  }
  const weeks = document.getElementById("weeks");
  const grid = document.getElementById("grid");
  for (const w of DATA.header.weeks) {
    const d = el("div", "week", { left: px(w.x), width: px(w.width) });
    d.textContent = w.label;
    d.title = w.date;
    weeks.appendChild(d);
    grid.appendChild(el("div", "wline", { left: px(w.x), width: px(w.width) }));
  }

  const today = document.getElementById("today");
  today.style.left = px(DATA.today_x);
  document.getElementById("todayPill").textContent = String(Number((DATA.today || "").slice(8, 10)) || "");

  // --- rows (both panes use the same row_height) ---------------------------
  const listBody = document.getElementById("listBody");
  const body = document.getElementById("canvasBody");
  const SVG_NS = "http://www.w3.org/2000/svg";

  for (const p of DATA.projects) {
    const li = el("div", "list-row", { height: px(p.row_height) });
    const code = el("div", "code"); code.textContent = p.code || p.id;
    const name = el("div", "name"); name.textContent = p.name || "";
    const tags = el("div", "tags");
    for (const t of [p.status, p.priority].concat(p.streams || [])) {
      if (!t) continue;
      const s = el("span", "tag"); s.textContent = t; tags.appendChild(s);
    }
    li.append(code, name, tags);
    listBody.appendChild(li);

    const row = el("div", "proj-row", { height: px(p.row_height) });
    const svg = document.createElementNS(SVG_NS, "svg");
    svg.setAttribute("height", String(p.row_height));
    svg.setAttribute("width", String(DATA.width));
    for (const c of p.connectors || []) {
      const path = document.createElementNS(SVG_NS, "path");
      path.setAttribute("d", c.path);
      path.setAttribute("stroke", "#26b9f7");
      path.setAttribute("stroke-width", "1.5");
      path.setAttribute("stroke-dasharray", "4 2");
      path.setAttribute("fill", "none");
      svg.appendChild(path);
    }
    row.appendChild(svg);

    for (const b of p.phases) {
      const color = colorOf(b.kind);
      const bar = el("div", "bar", {
        left: px(b.left), width: px(b.width), top: px(b.top), height: px(b.height),
        background: color + "33",
      });
      bar.title = (b.name || "Phase") + " " + (b.start || "") + " - " + (b.end || "");
      bar.appendChild(el("div", "accent", { background: color }));
      if (b.progress > 0) bar.appendChild(el("div", "fill", { width: px(b.progress_width), background: color }));
      if (b.label_level !== "icon") {
        const txt = el("div", "txt");
        const lbl = el("div", "lbl");
        const a = el("span"); a.textContent = (DATA.styles[b.kind] || {}).label || b.name || "Phase";
        const pr = el("span"); pr.textContent = String(b.progress || 0) + "%";
        lbl.append(a, pr);
        txt.appendChild(lbl);
        if (b.label_level === "full") {
          const ds = el("div", "dates"); ds.textContent = (b.start || "") + " - " + (b.end || "");
          txt.appendChild(ds);
        }
        bar.appendChild(txt);
      }
      row.appendChild(bar);
    }
    body.appendChild(row);
  }
  body.style.height = px(DATA.total_height);
  document.getElementById("meta").textContent = String(DATA.projects.length) + " projects";

  // --- dual-pane scroll sync (single re-entrancy guard) --------------------
  const left = document.getElementById("listScroll");
  const right = document.getElementById("canvasScroll");
  let syncing = false;
  function mirror(src, dst) {
    if (syncing) return;
    if (!dst || !dst.isConnected) return;
    syncing = true;
    try { dst.scrollTop = src.scrollTop; } finally { syncing = false; }
  }
  left.addEventListener("scroll", function () { mirror(left, right); });
  right.addEventListener("scroll", function () { mirror(right, left); });

  // --- centre today once the pane has a size -------------------------------
  let focused = false;
  function focusToday() {
    if (focused) return;
    const w = right.clientWidth;
    if (!w) { requestAnimationFrame(focusToday); return; }
    focused = true;
    const target = Math.max(0, DATA.today_x - w / 2);
    setTimeout(function () { right.scrollTo({ left: target, behavior: "smooth" }); }, Number(CFG.settle_delay_ms) || 0);
  }
  focusToday();
})();
"""
