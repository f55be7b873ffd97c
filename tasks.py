# tasks.py
"""
Background job executed by the RQ worker.

Flow:
1) Load the ebook request
2) Skip it if it is gone or already delivered
3) Email the download link
4) Flip email_sent → True

SMTP failures are raised so RQ's retry policy (set in delivery.py)
reschedules the job; the row stays pending until a send succeeds.
"""

import logging

from models import db, EbookRequest
from services import mark_email_sent
from email_sender import build_ebook_email, send_email

logger = logging.getLogger(__name__)

_flask_app = None


def get_flask_app():
    """The worker's Flask app, built on first use."""
    global _flask_app
    if _flask_app is None:
        # imported here to avoid a circular import with app.py
        from app import create_app
        _flask_app = create_app()
    return _flask_app


# ------------------------------------------------------------------------
def deliver_ebook(request_id):
    with get_flask_app().app_context():
        req = db.session.get(EbookRequest, request_id)
        if req is None:
            logger.warning("Ebook request %s no longer exists, nothing to send", request_id)
            return False
        if req.email_sent:
            return True

        subject, body = build_ebook_email(req.name)
        send_email(req.email, subject, body)

        mark_email_sent(db.session, req.id)
        logger.info("Ebook delivered to %s (request %s)", req.email, req.id)
        return True
