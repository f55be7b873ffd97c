from redis import Redis
from rq import Queue, SimpleWorker

from config import Config

redis_conn = Redis.from_url(Config.REDIS_URL)


def run(worker_cls=SimpleWorker):
    queue  = Queue(name=Config.RQ_QUEUE_NAME, connection=redis_conn)
    worker = worker_cls([queue], connection=redis_conn)
    print(f"✅ RQ worker ready, listening to: {Config.RQ_QUEUE_NAME}")
    # delivery retries with intervals are only re-queued by the scheduler
    worker.work(with_scheduler=True, logging_level=Config.LOG_LEVEL)


if __name__ == "__main__":
    run()
