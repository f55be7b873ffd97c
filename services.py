# services.py
"""
Business logic for ebook requests.

Every function takes the SQLAlchemy session it should work against, so
the Flask routes pass ``db.session`` and tests can hand in an isolated
store.

Flow of ``create_request``:
1) Validate name + email
2) Friendly duplicate check on the email
3) Insert the row (email_sent = False)
4) Hand the new id to ``on_created`` (the delivery queue)
"""

import logging
from datetime import datetime, time

from sqlalchemy.exc import SQLAlchemyError

from errors import DuplicateEmailError, StorageError
from models import EbookRequest
from validators import ValidationError, first_error, validate_request

logger = logging.getLogger(__name__)

MSG_CREATED   = "Thank you! Your ebook request has been received. Please check your email."
MSG_DUPLICATE = "This email address has already been used to request the ebook."
MSG_FAILED    = "Sorry, something went wrong. Please try again later."


def _insert_request(session, name, email):
    try:
        if session.query(EbookRequest).filter_by(email=email).first() is not None:
            raise DuplicateEmailError(email)

        req = EbookRequest(name=name, email=email, email_sent=False)
        session.add(req)
        session.commit()
        return req
    except SQLAlchemyError as e:
        session.rollback()
        # an IntegrityError here means another insert won the race past the pre-check
        raise StorageError(str(e)) from e


def create_request(session, name, email, on_created=None):
    try:
        data = validate_request(name, email)
    except ValidationError as e:
        return {"success": False, "message": first_error(e)}

    try:
        req = _insert_request(session, data["name"], data["email"])
    except DuplicateEmailError:
        logger.info("Duplicate ebook request for %s", data["email"])
        return {"success": False, "message": MSG_DUPLICATE}
    except StorageError:
        logger.exception("Ebook request creation failed")
        return {"success": False, "message": MSG_FAILED}

    logger.info("Ebook request %s created for %s", req.id, req.email)

    if on_created is not None:
        try:
            on_created(req.id)
        except Exception:
            # the row is committed; it stays pending until someone redelivers
            logger.exception("Could not schedule delivery for ebook request %s", req.id)

    return {"success": True, "message": MSG_CREATED, "id": req.id}


def list_requests(session):
    """All ebook requests, newest first."""
    return (
        session.query(EbookRequest)
        .order_by(EbookRequest.created_at.desc(), EbookRequest.id.desc())
        .all()
    )


def get_stats(session, now=None):
    """Counters for the admin view.

    ``requestsToday`` counts rows created at or after local midnight of
    ``now`` (defaults to the current local time).
    """
    now = now or datetime.now()
    start_of_day = datetime.combine(now.date(), time.min)

    query = session.query(EbookRequest)
    return {
        "totalRequests": query.count(),
        "emailsSent":    query.filter(EbookRequest.email_sent.is_(True)).count(),
        "pendingEmails": query.filter(EbookRequest.email_sent.is_(False)).count(),
        "requestsToday": query.filter(EbookRequest.created_at >= start_of_day).count(),
    }


def mark_email_sent(session, request_id):
    """Flag a request as delivered. Returns False if the id is unknown."""
    req = session.get(EbookRequest, request_id)
    if req is None:
        return False
    req.email_sent = True
    session.commit()
    return True
