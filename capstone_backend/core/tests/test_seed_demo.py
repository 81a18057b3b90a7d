"""
Tests for the seed_demo management command.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from capstone_backend.coordinators.models import ProjectCoordinator
from capstone_backend.faculty.models import Faculty
from capstone_backend.marks.models import MarkingSchema
from capstone_backend.panels.models import Panel
from capstone_backend.projects.models import Project


def seed(*args):
    out = StringIO()
    call_command("seed_demo", *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestSeedDemo:
    def test_seeds_a_working_department(self):
        output = seed()

        assert "Demo data created successfully!" in output
        assert Faculty.objects.count() == 7
        assert Project.objects.count() == 3
        assert Panel.objects.count() == 2
        assert not Project.objects.filter(panel__isnull=True).exists()
        assert ProjectCoordinator.objects.get().is_primary is True
        assert MarkingSchema.objects.get().get_review("review2")["faculty_type"] == "panel"

    def test_second_run_is_skipped(self):
        seed()

        assert "already present" in seed()
        assert Project.objects.count() == 3

    def test_clear_recreates(self):
        seed()

        seed("--clear")

        assert Project.objects.count() == 3
        assert Faculty.objects.filter(employee_id="A0001").count() == 1
