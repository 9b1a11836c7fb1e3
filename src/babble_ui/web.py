from __future__ import annotations
import argparse
import random
from flask import Flask, request, jsonify, Response
from babble.engine import Engine
from babble.config import DEFAULT_K, DEFAULT_SENTENCE_LENGTH

app = Flask(__name__)
_engine: Engine | None = None

MAX_LENGTH = 500

def _int_arg(name: str, default: int | None) -> int | None:
    """Missing -> default; present but not an integer -> None."""
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return None

# ---------- API ----------
@app.get("/api/generate")
def api_generate():
    length = _int_arg("length", DEFAULT_SENTENCE_LENGTH)
    k = _int_arg("k", DEFAULT_K)
    seed = _int_arg("seed", None)
    if length is None or not 0 < length <= MAX_LENGTH:
        return jsonify({"error": f"length must be between 1 and {MAX_LENGTH}"}), 400
    if k is None or k <= 0:
        return jsonify({"error": "k must be > 0"}), 400
    if seed is None and "seed" in request.args:
        return jsonify({"error": "seed must be an integer"}), 400
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503

    # a seeded request must not disturb the engine's own sequence
    rng = random.Random(seed) if seed is not None else None
    out = _engine.generate(length, k, rng=rng)
    return jsonify({"text": out.text, "phrases": out.phrases, "fallbacks": out.fallbacks})

@app.get("/api/health")
def api_health():
    n = _engine.suffix_count() if _engine is not None else 0
    return jsonify({"ok": n > 0, "suffixes": n})

# ---------- UI ----------
@app.get("/")
def home():
    # One button, one output line; no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Babble • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; margin:12px 0; }
.badge{ padding:8px 12px; border:1px solid var(--border); border-radius:12px; color:var(--muted); }
.badge input{ width:64px; background:transparent; border:none; color:var(--ink); font-size:15px; text-align:center; }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.btn:hover{ border-color:var(--accent) }
#out{ margin-top:12px; padding:14px; border:1px solid var(--border); border-radius:12px; min-height:3em; }
#meta{ color:var(--muted); font-size:13px; margin-top:6px; }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Babble</h1>
      <div class="controls">
        <div class="badge">Length <input id="length" type="number" min="1" max="500" value="12" /></div>
        <div class="badge">k <input id="k" type="number" min="1" max="10" value="2" /></div>
        <button id="go" class="btn">Generate</button>
      </div>
      <div id="out">Press Generate.</div>
      <div id="meta"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
async function generate(){
  const length = parseInt($("#length").value || "12", 10);
  const k = parseInt($("#k").value || "2", 10);
  try{
    const resp = await fetch(`/api/generate?length=${length}&k=${k}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    $("#out").textContent = data.text;
    $("#meta").textContent = `${data.phrases.length} phrases • ${data.fallbacks} fallbacks`;
  }catch(e){
    $("#out").textContent = `Error: ${e.message ?? e}`;
    $("#meta").textContent = "";
  }
}
$("#go").addEventListener("click", generate);
window.addEventListener("keydown", (ev)=>{ if(ev.key === "Enter") generate(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--file", required=True, help="Corpus file to generate from")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(seed=args.seed)
    _engine.load(args.file, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
