"""
Tests for marking schemas and team mark submission.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from capstone_backend.core.exceptions import BadRequestError
from capstone_backend.core.exceptions import PermissionDeniedError
from capstone_backend.core.exceptions import ValidationError
from capstone_backend.faculty.tests.factories import FacultyFactory
from capstone_backend.faculty_requests.models import FacultyRequest
from capstone_backend.faculty_requests.models import RequestStatus
from capstone_backend.marks import services
from capstone_backend.marks.models import Marks
from capstone_backend.marks.models import ReviewFeedback
from capstone_backend.panels.services import assign_panel_to_project
from capstone_backend.panels.tests.factories import PanelFactory
from capstone_backend.projects.services import complete_project
from capstone_backend.projects.tests.factories import ProjectFactory
from capstone_backend.students.tests.factories import StudentFactory

LEVELS = [{"score": s, "label": str(s)} for s in range(5)]
COMMENT = "Good progress on the design."


def review(name, faculty_type, deadline=None, **extra):
    return {
        "review_name": name,
        "display_name": name.title(),
        "faculty_type": faculty_type,
        "deadline": deadline.isoformat() if deadline else None,
        "requires_ppt": False,
        "components": [
            {"component_id": "problem", "name": "Problem", "max_marks": 10, "levels": LEVELS},
            {"component_id": "design", "name": "Design", "max_marks": 10, "levels": LEVELS},
        ],
        **extra,
    }


@pytest.fixture
def team(faculty):
    """Project guided by F1001 with two students and a two-member panel."""
    students = [StudentFactory(reg_no="22BCE1001"), StudentFactory(reg_no="22BCE1002")]
    project = ProjectFactory(guide_faculty=faculty, students=students)
    panel_member = FacultyFactory()
    panel = PanelFactory(members=[panel_member, FacultyFactory()])
    assign_panel_to_project(panel.id, project.id)
    services.upsert_marking_schema(
        "2025-2026",
        "SCOPE",
        "CSE",
        [review("review1", "guide"), review("review2", "panel")],
    )
    return {"project": project, "guide": faculty, "panel_member": panel_member}


def full_marks(*reg_nos):
    return {reg_no: {"problem": 4, "design": 2} for reg_no in reg_nos}


@pytest.mark.django_db
class TestMarkingSchema:
    def test_upsert_replaces_reviews(self):
        schema, created = services.upsert_marking_schema("2025-2026", "SCOPE", "CSE", [review("review1", "guide")])
        again, created_again = services.upsert_marking_schema(
            "2025-2026", "SCOPE", "CSE", [review("review2", "panel")]
        )

        assert created is True
        assert created_again is False
        assert again.pk == schema.pk
        assert [r["review_name"] for r in again.reviews] == ["review2"]

    @pytest.mark.parametrize(
        ("reviews", "message"),
        [
            ([review("review1", "guide"), review("review1", "panel")], "Duplicate review"),
            ([review("review1", "hod")], "must be marked by"),
            (
                [review("review1", "guide", components=[{"component_id": "x", "max_marks": 0, "levels": LEVELS}])],
                "greater than 0",
            ),
            (
                [review("review1", "guide", components=[{"component_id": "x", "max_marks": 5, "levels": []}])],
                "at least one level",
            ),
        ],
    )
    def test_invalid_reviews(self, reviews, message):
        with pytest.raises(ValidationError, match=message):
            services.validate_reviews(reviews)


@pytest.mark.django_db
class TestSubmitTeamMarks:
    def test_guide_submits(self, team):
        saved, feedback = services.submit_team_marks(
            team["guide"],
            team["project"].id,
            "review1",
            marks=full_marks("22BCE1001", "22BCE1002"),
            meta={},
            team_comment=COMMENT,
            ppt_approved=True,
        )

        assert len(saved) == 2
        assert saved[0].total_marks == Decimal("15.00")
        assert saved[0].max_total_marks == Decimal("20")
        assert feedback.ppt_approved is True

    def test_resubmission_replaces_rows(self, team):
        args = (team["guide"], team["project"].id, "review1")
        services.submit_team_marks(*args, full_marks("22BCE1001", "22BCE1002"), {}, COMMENT)

        services.submit_team_marks(
            *args,
            {"22BCE1001": {"problem": 0, "design": 0}, "22BCE1002": {"problem": 4, "design": 4}},
            {},
            "Updated after the demo.",
        )

        assert Marks.objects.count() == 2
        assert Marks.objects.get(student__reg_no="22BCE1001").total_marks == 0
        assert ReviewFeedback.objects.get().team_comment == "Updated after the demo."

    def test_absent_and_pat_students(self, team):
        saved, _ = services.submit_team_marks(
            team["guide"],
            team["project"].id,
            "review1",
            marks={},
            meta={"22BCE1001": {"attendance": "absent"}, "22BCE1002": {"pat": True}},
            team_comment=COMMENT,
        )

        by_student = {m.student.reg_no: m for m in saved}
        assert by_student["22BCE1001"].attendance == "absent"
        assert by_student["22BCE1001"].total_marks == 0
        assert by_student["22BCE1002"].pat is True
        assert by_student["22BCE1002"].component_marks == {}

    def test_ten_character_comment_accepted(self, team):
        saved, _ = services.submit_team_marks(
            team["guide"], team["project"].id, "review1", full_marks("22BCE1001", "22BCE1002"), {}, "0123456789"
        )

        assert len(saved) == 2

    def test_nine_character_comment_rejected(self, team):
        with pytest.raises(ValidationError, match="min 10 chars"):
            services.submit_team_marks(
                team["guide"], team["project"].id, "review1", full_marks("22BCE1001", "22BCE1002"), {}, "012345678"
            )
        assert not Marks.objects.exists()

    def test_incomplete_marks(self, team):
        with pytest.raises(ValidationError, match="Marks incomplete for student 22BCE1002."):
            services.submit_team_marks(
                team["guide"],
                team["project"].id,
                "review1",
                {**full_marks("22BCE1001"), "22BCE1002": {"problem": 3}},
                {},
                COMMENT,
            )

    def test_missing_student(self, team):
        with pytest.raises(ValidationError, match="Marks missing for students: 22BCE1002"):
            services.submit_team_marks(
                team["guide"], team["project"].id, "review1", full_marks("22BCE1001"), {}, COMMENT
            )
        assert not Marks.objects.exists()

    def test_student_outside_team(self, team):
        with pytest.raises(ValidationError, match="Students not in this project: 22BCE9999"):
            services.submit_team_marks(
                team["guide"],
                team["project"].id,
                "review1",
                full_marks("22BCE1001", "22BCE1002", "22BCE9999"),
                {},
                COMMENT,
            )

    def test_score_must_be_a_level(self, team):
        with pytest.raises(ValidationError, match="not a level"):
            services.submit_team_marks(
                team["guide"],
                team["project"].id,
                "review1",
                {"22BCE1001": {"problem": 7, "design": 1}, **full_marks("22BCE1002")},
                {},
                COMMENT,
            )

    def test_panel_review_needs_panel_member(self, team):
        with pytest.raises(PermissionDeniedError, match="panel"):
            services.submit_team_marks(
                team["guide"], team["project"].id, "review2", full_marks("22BCE1001", "22BCE1002"), {}, COMMENT
            )

        saved, _ = services.submit_team_marks(
            team["panel_member"], team["project"].id, "review2", full_marks("22BCE1001", "22BCE1002"), {}, COMMENT
        )
        assert saved[0].faculty_type == "panel"

    def test_guide_review_needs_guide(self, team):
        with pytest.raises(PermissionDeniedError, match="guide"):
            services.submit_team_marks(
                team["panel_member"], team["project"].id, "review1", full_marks("22BCE1001", "22BCE1002"), {}, COMMENT
            )

    def test_completed_project(self, team):
        complete_project(team["project"].id)

        with pytest.raises(BadRequestError, match="completed project"):
            services.submit_team_marks(
                team["guide"], team["project"].id, "review1", full_marks("22BCE1001", "22BCE1002"), {}, COMMENT
            )


@pytest.mark.django_db
class TestReviewDeadline:
    """Past the deadline, marks need an approved request."""

    @pytest.fixture
    def late_team(self, team):
        services.upsert_marking_schema(
            "2025-2026",
            "SCOPE",
            "CSE",
            [review("review1", "guide", deadline=timezone.now() - timedelta(days=1))],
        )
        return team

    def submit(self, team):
        return services.submit_team_marks(
            team["guide"], team["project"].id, "review1", full_marks("22BCE1001", "22BCE1002"), {}, COMMENT
        )

    def test_blocked_after_deadline(self, late_team):
        with pytest.raises(PermissionDeniedError) as exc_info:
            self.submit(late_team)

        assert exc_info.value.code == "DEADLINE_PASSED"

    def make_request(self, team, status, new_deadline=None):
        return FacultyRequest.objects.create(
            faculty=team["guide"],
            project=team["project"],
            review_name="review1",
            category="guide",
            message="Missed the review day.",
            status=status,
            resolved_at=timezone.now(),
            new_deadline=new_deadline,
        )

    def test_approved_request_reopens(self, late_team):
        self.make_request(late_team, RequestStatus.APPROVED)

        saved, _ = self.submit(late_team)

        assert len(saved) == 2

    def test_pending_request_does_not_reopen(self, late_team):
        self.make_request(late_team, RequestStatus.PENDING)

        with pytest.raises(PermissionDeniedError):
            self.submit(late_team)

    def test_expired_extension(self, late_team):
        self.make_request(late_team, RequestStatus.APPROVED, new_deadline=timezone.now() - timedelta(hours=1))

        with pytest.raises(PermissionDeniedError):
            self.submit(late_team)


@pytest.mark.django_db
class TestMarksAPI:
    """Tests for /api/admin/marking-schema and /api/faculty/marks."""

    def test_create_then_update_schema(self, admin_client):
        body = {
            "academicYear": "2025-2026",
            "school": "SCOPE",
            "department": "CSE",
            "reviews": [
                {
                    "reviewName": "review1",
                    "facultyType": "guide",
                    "components": [
                        {"componentId": "problem", "name": "Problem", "maxMarks": 10, "levels": [{"score": 4}]}
                    ],
                }
            ],
        }

        first = admin_client.post("/api/admin/marking-schema", data=body, content_type="application/json")
        second = admin_client.post("/api/admin/marking-schema", data=body, content_type="application/json")

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()["data"]["reviews"][0]["components"][0]["component_id"] == "problem"

    def test_non_primary_coordinator_cannot_edit_schema(self, coordinator_client):
        response = coordinator_client.post(
            "/api/admin/marking-schema",
            data={"academicYear": "2025-2026", "school": "SCOPE", "department": "CSE", "reviews": []},
            content_type="application/json",
        )

        assert response.status_code == 403

    def test_faculty_reads_schema(self, faculty_client, team):
        response = faculty_client.get(
            "/api/admin/marking-schema",
            {"academic_year": "2025-2026", "school": "SCOPE", "department": "CSE"},
        )

        assert response.status_code == 200
        assert len(response.json()["data"]["reviews"]) == 2

    def test_submit_and_list(self, faculty_client, team):
        response = faculty_client.post(
            "/api/faculty/marks",
            data={
                "projectId": str(team["project"].id),
                "reviewName": "review1",
                "marks": full_marks("22BCE1001", "22BCE1002"),
                "meta": {"22BCE1002": {"attendance": "present", "pat": False}},
                "teamComment": COMMENT,
            },
            content_type="application/json",
        )
        assert response.status_code == 200
        assert response.json()["data"]["marks"][0]["total_marks"] == 15.0

        listed = faculty_client.get("/api/faculty/marks", {"review_name": "review1"})
        assert listed.json()["count"] == 2

    def test_admin_without_profile_cannot_submit(self, admin_client, team):
        response = admin_client.post(
            "/api/faculty/marks",
            data={"projectId": str(team["project"].id), "reviewName": "review1", "teamComment": COMMENT},
            content_type="application/json",
        )

        assert response.status_code == 403
