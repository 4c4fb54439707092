# app.py — Flask preview service that renders octave noise as PNG
# deps: pip install flask numpy pillow

from __future__ import annotations
import logging

from flask import Flask, request, jsonify, make_response

from octave_noise.config import (
    DEFAULT_OCTAVES,
    DEFAULT_PREVIEW_OCTAVES,
    MAX_PREVIEW_OCTAVES,
    MAX_PREVIEW_SIZE,
    PREVIEW_PORT,
)
from octave_noise.errors import NoiseError
from octave_noise.export import encode_png
from octave_noise.grid import make_rng
from octave_noise.pipeline import generate

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,OPTIONS"
    return resp

# ======= helpers =======
def _int_arg(name, default):
    raw = request.args.get(name, None)
    if raw in (None, "", "null"):
        return default
    return int(raw)

# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {
        "ok": True,
        "noise": "/noise.png?octaves=&size=&seed= (GET)",
        "default_octaves": DEFAULT_OCTAVES,
        "preview_octaves": DEFAULT_PREVIEW_OCTAVES,
        "max_size": MAX_PREVIEW_SIZE,
    }

@app.route("/noise.png", methods=["GET"])
def noise_png():
    """
    Query:
      octaves: int >= 1            (default DEFAULT_PREVIEW_OCTAVES)
      size:    int in [1, MAX]     (default 2**octaves)
      seed:    int                 (default: fresh entropy)
    """
    try:
        octaves = _int_arg("octaves", DEFAULT_PREVIEW_OCTAVES)
        size    = _int_arg("size", None)
        seed    = _int_arg("seed", None)
    except ValueError:
        return jsonify({"error": "octaves, size and seed must be integers"}), 400

    if octaves > MAX_PREVIEW_OCTAVES:
        return jsonify({"error": f"octaves must be <= {MAX_PREVIEW_OCTAVES}"}), 400
    if size is None:
        size = (1 << octaves) if octaves > 0 else 1
    if size > MAX_PREVIEW_SIZE:
        return jsonify({"error": f"size must be <= {MAX_PREVIEW_SIZE}"}), 400

    try:
        grid = generate(octaves, size, rng=make_rng(seed))
    except (NoiseError, ValueError) as e:
        logger.warning(f"Rejected noise request: {e}")
        return jsonify({"error": str(e)}), 400

    resp = make_response(encode_png(grid))
    resp.headers["Content-Type"] = "image/png"
    return resp


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(host="0.0.0.0", port=PREVIEW_PORT, threaded=True)
