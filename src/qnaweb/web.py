from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from qnamatch import config as CFG
from qnamatch.engine import Engine

app = Flask(__name__)
_engine: Engine = Engine()  # empty corpus until main()/tests install a loaded one

# ---------- API ----------
@app.get("/api/answer")
def api_answer():
    q = request.args.get("q", "", type=str)
    return jsonify(_engine.get_answer(q).to_dict())

@app.get("/api/best")
def api_best():
    q = request.args.get("q", "", type=str)
    return jsonify({"variant": _engine.find_best_match(q), "originalText": q})

@app.get("/health")
def health():
    return jsonify({"ok": True, "ready": _engine.ready, "entries": _engine.size})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: one input, numbered answers, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Q&amp;A matcher</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; --danger:#ff4757; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
textarea{ width:100%; min-height:90px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; resize:vertical; }
textarea:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.answer{ color:rgb(145,145,145); padding:4px 0; }
.none{ color:var(--danger); padding:4px 0; }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Q&amp;A matcher</h1>
      <form id="f"><textarea id="q" placeholder="Paste a question…" autofocus></textarea></form>
      <div id="stats" class="meta">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
let t;
async function ask(){
  const text = q.value.trim();
  if(!text){ out.innerHTML = ""; stats.textContent = "Ready."; return; }
  try{
    const resp = await fetch(`/api/answer?q=${encodeURIComponent(text)}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Answers: ${data.answer.length}`;
    out.innerHTML = data.answer.length
      ? data.answer.map((a, i) => `<div class="answer">${i + 1}. ${esc(a)}</div>`).join("")
      : `<div class="none">No answer found</div>`;
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(ask, 200); });
document.querySelector("#f").addEventListener("submit", (ev) => { ev.preventDefault(); ask(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask API on top of Engine")
    ap.add_argument("--corpus", default=None,
                    help=f"JSON corpus path (default: ${CFG.CORPUS_ENV} or {CFG.DEFAULT_CORPUS_PATH})")
    ap.add_argument("--threshold", type=int, default=CFG.THRESHOLD)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    try:
        # serve immediately; answers fill in once the corpus is loaded
        _engine = Engine.load(args.corpus, background=True, threshold=args.threshold, verbose=args.verbose)
    except ValueError as e:
        ap.error(str(e))

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
