from celery import Celery
from app.core.config import settings
from app.core.logging import setup_logging

setup_logging()

# Celery application
app = Celery(
    "mailbox",
    broker=settings.REDIS_URL,
    backend=settings.REDIS_URL,
)

# Autodiscover tasks package
app.autodiscover_tasks(["app.tasks"], related_name="send_message")
