import logging

from celery import shared_task

from capstone_backend.broadcasts.models import BroadcastMessage

logger = logging.getLogger(__name__)


@shared_task
def deactivate_expired_broadcasts() -> int:
    """Switch off broadcasts whose expiry has passed; returns how many changed."""
    count = BroadcastMessage.objects.deactivate_expired()
    logger.info("EVENT: broadcasts_expired count=%d", count)
    return count
