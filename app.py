# app.py
import logging

from flask import Flask

from config import Config
from models import db
from routes import bp


def create_app(config_object=Config):
    """Build the landing-page app.

    Serve with ``gunicorn "app:create_app()"`` or ``flask --app app run``.
    """
    # ── Flask setup ────────────────────────────────────────────────────────────
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db.init_app(app)
    app.register_blueprint(bp)

    # ── one-time DB init ───────────────────────────────────────────────────────
    with app.app_context():
        db.create_all()

    return app


# ── Local run helper (ignored by Gunicorn) ────────────────────────────────────
if __name__ == "__main__":
    create_app().run(debug=True)
