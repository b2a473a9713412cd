from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from termcomplete.engine import Engine
from termcomplete import config as CFG

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.TOP_K, type=int)
    if not q or _engine is None:
        return jsonify([])
    rows = _engine.complete(q, top_k=k if k > 0 else None)
    return jsonify([t.as_dict() for t in rows])

@app.get("/health")
def health():
    loaded = _engine is not None and _engine.ready
    return jsonify({"ok": True, "loaded": loaded, "terms": _engine.size if _engine else 0})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: inline CSS + a little JS, no external assets.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Term Autocomplete</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial;
}
.container{ max-width:760px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0 }
.controls input[type=text]{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.controls input[type=number]{
  width:72px; padding:10px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); text-align:center;
}
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border) }
.row{
  display:grid; grid-template-columns:3rem 9rem 1fr; gap:10px;
  padding:10px 14px; border-top:1px solid var(--border);
}
.row:first-child{ border-top:none }
.head{ background:#0d131a; font-weight:600; color:var(--muted) }
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
.mark{ background:var(--mark-bg) }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Term Autocomplete</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a prefix…" autocomplete="off" autofocus />
        <input id="k" type="number" min="1" max="100" value="10" title="Top-K" />
      </div>
      <div id="stats" class="meta">Ready. Matching is case-sensitive.</div>
      <div class="results">
        <div class="row head"><div>#</div><div>Weight</div><div>Term</div></div>
        <div id="out" class="empty">Start typing to see results.</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), stats = $("#stats"), k = $("#k");
let t;
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function mark(text, prefix){
  // every result starts with the prefix
  return `<span class="mark">${esc(text.slice(0, prefix.length))}</span>${esc(text.slice(prefix.length))}`;
}
async function search(){
  const prefix = q.value;
  if(prefix.length === 0){
    out.className = "empty"; out.innerHTML = "Start typing to see results.";
    stats.textContent = "Ready. Matching is case-sensitive."; return;
  }
  const topk = Math.max(1, Math.min(100, parseInt(k.value || "10", 10)));
  const t0 = performance.now();
  try{
    const resp = await fetch(`/api/complete?q=${encodeURIComponent(prefix)}&k=${topk}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Results: ${data.length} • ~${Math.max(1, Math.round(performance.now() - t0))} ms`;
    if(data.length === 0){ out.className = "empty"; out.innerHTML = "No matches."; return; }
    out.className = "";
    out.innerHTML = data.map((r, i) => `
      <div class="row">
        <div class="small">${i + 1}</div>
        <div class="small">${r.weight}</div>
        <div>${mark(r.text, prefix)}</div>
      </div>`).join("");
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debounced);
k.addEventListener("change", debounced);
window.addEventListener("keydown", (ev) => {
  if(ev.key === "Escape"){ q.value = ""; search(); }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask UI on top of Engine")
    ap.add_argument("--terms", required=True, help="Catalogue file to serve")
    ap.add_argument("--max-chars", type=int, default=None)
    ap.add_argument("--check-sorted", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.load(args.terms, max_chars=args.max_chars,
                 check_sorted=args.check_sorted or None, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
