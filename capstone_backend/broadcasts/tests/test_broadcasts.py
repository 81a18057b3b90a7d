"""
Tests for broadcast notices.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from capstone_backend.broadcasts import services
from capstone_backend.broadcasts.models import BroadcastMessage
from capstone_backend.broadcasts.tasks import deactivate_expired_broadcasts
from capstone_backend.core.exceptions import NotFoundError
from capstone_backend.core.exceptions import ValidationError


def in_days(days):
    return timezone.now() + timedelta(days=days)


def make_broadcast(created_by, **overrides):
    data = {"message": "Review 1 starts on Monday.", "expires_at": in_days(7)}
    data.update(overrides)
    return services.create_broadcast(data, created_by)


@pytest.mark.django_db
class TestCreateBroadcast:
    def test_creator_details_from_faculty_profile(self, admin_faculty):
        broadcast = make_broadcast(admin_faculty.user)

        assert broadcast.created_by_employee_id == "A0001"
        assert broadcast.created_by_name == admin_faculty.name
        assert broadcast.action == "notice"
        assert broadcast.priority == "medium"

    def test_creator_without_profile(self, admin_user):
        broadcast = make_broadcast(admin_user)

        assert broadcast.created_by_employee_id == ""
        assert broadcast.created_by_name == "Portal Admin"

    def test_requires_message_and_expiry(self, admin_user):
        with pytest.raises(ValidationError, match="Message and expiration date are required."):
            services.create_broadcast({"message": "No expiry"}, admin_user)

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("action", "popup", "Action must be"),
            ("priority", "critical", "Priority must be"),
        ],
    )
    def test_invalid_choices(self, admin_user, field, value, message):
        with pytest.raises(ValidationError, match=message):
            make_broadcast(admin_user, **{field: value})

    def test_naive_expiry_string(self, admin_user):
        broadcast = make_broadcast(admin_user, expires_at="2030-06-01T10:00:00")

        assert timezone.is_aware(broadcast.expires_at)


@pytest.mark.django_db
class TestListBroadcasts:
    def test_expired_are_deactivated(self, admin_user):
        expired = make_broadcast(admin_user)
        BroadcastMessage.objects.filter(pk=expired.pk).update(expires_at=in_days(-1))
        current = make_broadcast(admin_user)

        active = services.list_broadcasts(is_active=True)

        assert [b.pk for b in active] == [current.pk]
        assert BroadcastMessage.objects.get(pk=expired.pk).is_active is False

    def test_empty_targets_reach_everyone(self, admin_user):
        everyone = make_broadcast(admin_user)
        make_broadcast(admin_user, target_schools=["SELECT"])

        found = services.list_broadcasts(school="SCOPE")

        assert [b.pk for b in found] == [everyone.pk]

    def test_faculty_audience(self, admin_user, faculty):
        for_cse = make_broadcast(admin_user, target_departments=["CSE", "IT"])
        make_broadcast(admin_user, target_departments=["MECH"])
        make_broadcast(admin_user, target_academic_years=["2024-2025"])

        found = services.broadcasts_for_faculty(faculty, academic_year="2025-2026")

        assert [b.pk for b in found] == [for_cse.pk]


@pytest.mark.django_db
class TestUpdateAndDeleteBroadcast:
    def test_none_values_are_skipped(self, admin_user):
        broadcast = make_broadcast(admin_user, title="Schedule")

        updated = services.update_broadcast(broadcast.id, {"title": None, "priority": "urgent"})

        assert updated.title == "Schedule"
        assert updated.priority == "urgent"

    def test_delete_unknown(self):
        with pytest.raises(NotFoundError, match="Broadcast not found."):
            services.delete_broadcast("00000000-0000-0000-0000-000000000000")


@pytest.mark.django_db
class TestBroadcastTasks:
    def test_deactivate_expired(self, admin_user):
        broadcast = make_broadcast(admin_user)
        BroadcastMessage.objects.filter(pk=broadcast.pk).update(expires_at=in_days(-1))

        assert deactivate_expired_broadcasts.apply().get() == 1
        assert BroadcastMessage.objects.filter(is_active=True).count() == 0


@pytest.mark.django_db
class TestBroadcastAPI:
    """Tests for /api/admin/broadcasts and /api/faculty/broadcasts."""

    def test_admin_creates(self, admin_client):
        response = admin_client.post(
            "/api/admin/broadcasts",
            data={
                "message": "Review 1 starts on Monday.",
                "expiresAt": in_days(3).isoformat(),
                "targetSchools": ["SCOPE"],
                "priority": "high",
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        assert response.json()["data"]["target_schools"] == ["SCOPE"]

    def test_missing_expiry(self, admin_client):
        response = admin_client.post(
            "/api/admin/broadcasts",
            data={"message": "Review 1 starts on Monday."},
            content_type="application/json",
        )

        assert response.status_code == 400

    def test_faculty_sees_active(self, faculty_client, admin_user):
        make_broadcast(admin_user, target_schools=["SCOPE"])

        response = faculty_client.get("/api/faculty/broadcasts")

        assert response.status_code == 200
        assert response.json()["count"] == 1

    def test_faculty_cannot_create(self, faculty_client):
        response = faculty_client.post(
            "/api/admin/broadcasts",
            data={"message": "Hello", "expiresAt": in_days(3).isoformat()},
            content_type="application/json",
        )

        assert response.status_code == 403
