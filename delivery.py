# delivery.py
import logging

from flask import current_app
from redis import Redis
from rq import Queue, Retry

logger = logging.getLogger(__name__)

# Referenced by import path so the web process never imports tasks.py
DELIVERY_JOB = "tasks.deliver_ebook"


def get_queue():
    """RQ queue for the current app, created once and kept on ``app.extensions``."""
    queue = current_app.extensions.get("rq_queue")
    if queue is None:
        redis_conn = Redis.from_url(current_app.config["REDIS_URL"])
        queue = Queue(name=current_app.config["RQ_QUEUE_NAME"], connection=redis_conn)
        current_app.extensions["rq_queue"] = queue
    return queue


def enqueue_delivery(request_id):
    cfg = current_app.config
    if not cfg["DELIVERY_ENABLED"]:
        logger.info("Delivery disabled, ebook request %s left pending", request_id)
        return None

    job = get_queue().enqueue(
        DELIVERY_JOB,
        request_id,
        retry=Retry(max=cfg["DELIVERY_MAX_RETRIES"], interval=cfg["DELIVERY_RETRY_INTERVALS"]),
    )
    logger.info("Queued delivery job %s for ebook request %s", job.id, request_id)
    return job
