# routes.py
from datetime import datetime

from flask import Blueprint, request, jsonify, render_template_string

from models import db
from delivery import enqueue_delivery
import services

bp = Blueprint("ebook", __name__)

# ── HTML form template ────────────────────────────────────────────────────────
FORM_HTML = """
<h2>📚 Get your free ebook</h2>
{% if message %}<p><strong>{{ message }}</strong></p>{% endif %}
<form method="post">
  Name:  <input type="text"  name="name"  maxlength="100" required><br>
  Email: <input type="email" name="email" maxlength="255" required><br>
  <button type="submit">Send me the ebook</button>
</form>
"""


def _status_for(result):
    if result["success"]:
        return 201
    if result["message"] == services.MSG_DUPLICATE:
        return 409
    if result["message"] == services.MSG_FAILED:
        return 500
    return 400


# ── Landing page ──────────────────────────────────────────────────────────────
@bp.route("/", methods=["GET", "POST"])
def index():
    message = ""
    if request.method == "POST":
        result = services.create_request(
            db.session,
            request.form.get("name", ""),
            request.form.get("email", ""),
            on_created=enqueue_delivery,
        )
        message = result["message"]

    return render_template_string(FORM_HTML, message=message)


# ── JSON API (same operation names the frontend calls) ───────────────────────
@bp.route("/api/healthcheck", methods=["GET"])
def healthcheck():
    return jsonify({"status": "ok", "timestamp": datetime.now().isoformat()})


@bp.route("/api/createEbookRequest", methods=["POST"])
def create_ebook_request():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    result = services.create_request(
        db.session,
        data.get("name"),
        data.get("email"),
        on_created=enqueue_delivery,
    )
    return jsonify(result), _status_for(result)


@bp.route("/api/getEbookRequests", methods=["GET"])
def get_ebook_requests():
    return jsonify([r.to_dict() for r in services.list_requests(db.session)])


@bp.route("/api/getEbookRequestStats", methods=["GET"])
def get_ebook_request_stats():
    return jsonify(services.get_stats(db.session))
