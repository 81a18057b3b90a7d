"""Celery configuration for the capstone review portal."""

import os

from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.local")

app = Celery("capstone_backend")

# - namespace='CELERY' means all celery-related configuration keys
#   should have a `CELERY_` prefix.
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

app.conf.beat_schedule = {
    "deactivate-expired-broadcasts": {
        "task": "capstone_backend.broadcasts.tasks.deactivate_expired_broadcasts",
        "schedule": crontab(minute="*/15"),
    },
}
