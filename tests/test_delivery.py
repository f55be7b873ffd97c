import pytest

import tasks
from delivery import DELIVERY_JOB, enqueue_delivery
from models import EbookRequest
from services import create_request


class FakeJob:
    id = "job-1"


class FakeQueue:
    def __init__(self):
        self.calls = []

    def enqueue(self, func, *args, **kwargs):
        self.calls.append((func, args, kwargs))
        return FakeJob()


@pytest.fixture()
def queue(app):
    fake = FakeQueue()
    app.extensions["rq_queue"] = fake
    app.config["DELIVERY_ENABLED"] = True
    return fake


@pytest.fixture()
def outbox(app, monkeypatch):
    sent = []
    monkeypatch.setattr(tasks, "_flask_app", app)
    monkeypatch.setattr(tasks, "send_email", lambda to, subject, body: sent.append((to, subject, body)))
    return sent


def test_enqueue_delivery_uses_retry_policy(app, queue):
    job = enqueue_delivery(42)

    assert job.id == "job-1"
    ((func, args, kwargs),) = queue.calls
    assert func == DELIVERY_JOB
    assert args == (42,)
    assert kwargs["retry"].max == app.config["DELIVERY_MAX_RETRIES"]


def test_enqueue_skipped_when_disabled(app, queue):
    app.config["DELIVERY_ENABLED"] = False
    assert enqueue_delivery(42) is None
    assert queue.calls == []


def test_api_create_schedules_delivery(client, queue):
    resp = client.post("/api/createEbookRequest", json={"name": "John Doe", "email": "john.doe@example.com"})
    new_id = resp.get_json()["id"]

    assert [args for _, args, _ in queue.calls] == [(new_id,)]


def test_deliver_ebook_sends_and_flags(session, outbox):
    result = create_request(session, "John Doe", "john.doe@example.com")

    assert tasks.deliver_ebook(result["id"]) is True

    ((to, subject, body),) = outbox
    assert to == "john.doe@example.com"
    assert "Design Systems" in subject
    assert "Hello John Doe" in body
    assert "https://example.com/ebook.pdf" in body

    session.expire_all()
    assert session.get(EbookRequest, result["id"]).email_sent is True


def test_deliver_ebook_does_not_resend(session, outbox):
    result = create_request(session, "John Doe", "john.doe@example.com")

    tasks.deliver_ebook(result["id"])
    tasks.deliver_ebook(result["id"])

    assert len(outbox) == 1


def test_deliver_ebook_unknown_id(outbox):
    assert tasks.deliver_ebook(9999) is False
    assert outbox == []


def test_smtp_failure_leaves_request_pending(session, monkeypatch, outbox):
    def refuse(to, subject, body):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr(tasks, "send_email", refuse)
    result = create_request(session, "John Doe", "john.doe@example.com")

    with pytest.raises(ConnectionRefusedError):
        tasks.deliver_ebook(result["id"])

    session.expire_all()
    assert session.get(EbookRequest, result["id"]).email_sent is False
