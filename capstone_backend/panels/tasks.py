"""
Celery tasks for running panel batch operations asynchronously.
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


def _acting_user(user_id: str | None):
    from capstone_backend.users.models import User

    if not user_id:
        return None
    return User.objects.filter(id=user_id).first()


@shared_task(bind=True, max_retries=3)
def auto_create_panels_task(
    self,
    departments: list[str],
    school: str,
    academic_year: str,
    panel_size: int | None = None,
    user_id: str | None = None,
) -> dict:
    """
    Create panels for several departments in the background.

    Args:
        departments: Department names within ``school``
        school: School name
        academic_year: Academic year, e.g. "2025-2026"
        panel_size: Members per panel; settings default when omitted
        user_id: UUID of the user who started the run

    Returns:
        Dict with the batch result
    """
    from capstone_backend.panels.services import auto_create_panels

    logger.info("Starting panel auto-creation for %s/%s", school, ", ".join(departments))
    try:
        result = auto_create_panels(
            departments,
            school,
            academic_year,
            panel_size=panel_size,
            created_by=_acting_user(user_id),
        )
    except Exception as e:
        logger.exception("Error running panel auto-creation: %s", e)
        raise self.retry(exc=e, countdown=60)
    return {"success": True, **result.to_dict()}


@shared_task(bind=True, max_retries=3)
def auto_assign_panels_task(
    self,
    academic_year: str,
    school: str,
    department: str,
    user_id: str | None = None,
) -> dict:
    """Assign panels to every unassigned project of a scope in the background."""
    from capstone_backend.panels.services import auto_assign_panels_to_projects

    logger.info("Starting panel auto-assignment for %s/%s/%s", academic_year, school, department)
    try:
        result = auto_assign_panels_to_projects(
            academic_year,
            school,
            department,
            assigned_by=_acting_user(user_id),
        )
    except Exception as e:
        logger.exception("Error running panel auto-assignment: %s", e)
        raise self.retry(exc=e, countdown=60)
    return {"success": True, **result.to_dict()}
