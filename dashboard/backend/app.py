"""
Public Finance Sunburst: Flask server.

Endpoints:
    GET  /                  - Sunburst page
    GET  /api/view          - Current navigation state and figure
    POST /api/click         - Dispatch a click on a node id
    POST /api/panel/close   - Close the detail panel
    POST /api/reset         - Center the root again
    GET  /api/hierarchy     - Flattened arrays and node index
"""

import logging
import os
import sys
import threading

from flask import Flask, jsonify, render_template, request
from flask_cors import CORS

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from pfsunburst.config import (
    get_color_policy_name,
    get_identity_mode,
    get_server_port,
    get_wrap_width,
)
from pfsunburst.hierarchy.colors import color_policy_from_name
from pfsunburst.hierarchy.flattener import FlattenerConfig
from pfsunburst.view import SunburstView

logging.basicConfig(
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger("dashboard")

app = Flask(__name__)
CORS(app)

# ── Global session state ─────────────────────────────────────────────────────
session = {
    "view": None,
}
session_lock = threading.Lock()


def build_view() -> SunburstView:
    """Flatten the taxonomy and open a view subscribed to click events."""
    config = FlattenerConfig(
        wrap_width=get_wrap_width(),
        color_policy=color_policy_from_name(get_color_policy_name()),
        identity=get_identity_mode(),
    )
    view = SunburstView(config=config)
    view.open()
    logger.info(f"View ready: {view.hierarchy}")
    return view


def get_view() -> SunburstView:
    with session_lock:
        if session["view"] is None:
            session["view"] = build_view()
        return session["view"]


def close_view():
    """Release the view's click subscription."""
    with session_lock:
        if session["view"] is not None:
            session["view"].close()
            session["view"] = None


# ── Endpoints ─────────────────────────────────────────────────────────────────


@app.route("/", methods=["GET"])
def index():
    return render_template("index.html")


@app.route("/api/view", methods=["GET"])
def view_data():
    """Return the navigation state and the figure for the current focus."""
    try:
        return jsonify(get_view().snapshot())
    except Exception as e:
        logger.exception("Failed to build view")
        return jsonify({"error": str(e)}), 500


@app.route("/api/click", methods=["POST"])
def click():
    """Dispatch a click on the node id sent by the browser."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data.get("id"):
        return jsonify({"error": "Missing 'id' field"}), 400
    if not isinstance(data["id"], str):
        return jsonify({"error": "'id' must be a string"}), 400

    try:
        view = get_view()
        view.channel.emit(data["id"])
        return jsonify(view.snapshot())
    except Exception as e:
        logger.exception("Click failed")
        return jsonify({"error": str(e)}), 500


@app.route("/api/panel/close", methods=["POST"])
def close_panel():
    try:
        view = get_view()
        view.close_detail_panel()
        return jsonify(view.snapshot())
    except Exception as e:
        logger.exception("Closing the detail panel failed")
        return jsonify({"error": str(e)}), 500


@app.route("/api/reset", methods=["POST"])
def reset():
    try:
        view = get_view()
        view.reset()
        return jsonify(view.snapshot())
    except Exception as e:
        logger.exception("Reset failed")
        return jsonify({"error": str(e)}), 500


@app.route("/api/hierarchy", methods=["GET"])
def hierarchy_data():
    """Return the flattened arrays and the node index."""
    try:
        return jsonify(get_view().hierarchy.to_dict())
    except Exception as e:
        logger.exception("Failed to serialize hierarchy")
        return jsonify({"error": str(e)}), 500


if __name__ == "__main__":
    debug = os.environ.get("FLASK_DEBUG", "1") == "1"
    try:
        get_view()
        app.run(debug=debug, port=get_server_port(), use_reloader=False)
    finally:
        close_view()
