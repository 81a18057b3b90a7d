"""
Seed command to populate database with demo data for frontend development.

Usage:
    python manage.py seed_demo
    python manage.py seed_demo --clear  # Clear existing demo data first
"""

import logging
from datetime import timedelta

from django.contrib.auth.models import Group as AuthGroup
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from capstone_backend.academics.models import AcademicYear
from capstone_backend.academics.models import Department
from capstone_backend.academics.models import DepartmentConfig
from capstone_backend.academics.models import School
from capstone_backend.academics.services import upsert_department_config
from capstone_backend.broadcasts.models import BroadcastMessage
from capstone_backend.coordinators.models import ProjectCoordinator
from capstone_backend.coordinators.services import assign_coordinator
from capstone_backend.core.roles import Role
from capstone_backend.faculty.models import Faculty
from capstone_backend.faculty.services import create_admin
from capstone_backend.faculty.services import create_faculty
from capstone_backend.marks.models import MarkingSchema
from capstone_backend.marks.services import upsert_marking_schema
from capstone_backend.panels.models import Panel
from capstone_backend.panels.services import auto_assign_panels_to_projects
from capstone_backend.panels.services import auto_create_panels
from capstone_backend.projects.models import Project
from capstone_backend.projects.services import create_project
from capstone_backend.students.models import Student
from capstone_backend.students.services import upload_students
from capstone_backend.users.models import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "demo123"
YEAR = "2025-2026"
SCHOOL = "SCOPE"
DEPARTMENT = "CSE"

FACULTY_DATA = [
    ("F1001", "Dr. Anitha Rao", ["AI/ML"]),
    ("F1002", "Dr. Vikram Menon", ["AI/ML"]),
    ("F1003", "Dr. Kavya Iyer", ["AI/ML", "Security"]),
    ("F1004", "Dr. Rahul Nair", ["Security"]),
    ("F1005", "Dr. Meera Pillai", ["Security"]),
    ("F1006", "Dr. Arjun Das", ["Web"]),
]

STUDENT_DATA = [
    ("22BCE1001", "Aditi Sharma"),
    ("22BCE1002", "Karan Patel"),
    ("22BCE1003", "Neha Gupta"),
    ("22BCE1004", "Rohan Verma"),
    ("22BCE1005", "Sneha Reddy"),
    ("22BCE1006", "Vivek Kumar"),
]

REVIEW_LEVELS = [
    {"score": 0, "label": "Missing"},
    {"score": 1, "label": "Weak"},
    {"score": 2, "label": "Adequate"},
    {"score": 3, "label": "Good"},
    {"score": 4, "label": "Excellent"},
]


class Command(BaseCommand):
    help = "Seed database with demo data for frontend development"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Clear existing demo data before seeding",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            self.clear_demo_data()

        if Faculty.objects.filter(employee_id=FACULTY_DATA[0][0]).exists():
            self.stdout.write(self.style.WARNING("Demo data already present, use --clear to recreate it."))
            return

        self.stdout.write("Creating demo data...")
        with transaction.atomic():
            self.create_role_groups()
            self.create_master_data()
            admin = self.create_people()
            self.create_projects(admin)
            self.create_marking_schema(admin)
            self.create_broadcast(admin)

        self.stdout.write(self.style.SUCCESS("\nDemo data created successfully!"))
        self.stdout.write("\nSummary:")
        self.stdout.write(f"  - 1 Admin: {admin.email}")
        self.stdout.write(f"  - {len(FACULTY_DATA)} Faculty, {FACULTY_DATA[0][1]} coordinates {SCHOOL}/{DEPARTMENT}")
        self.stdout.write(f"  - {len(STUDENT_DATA)} Students in {YEAR}")
        self.stdout.write(f"  - {Project.objects.filter(academic_year=YEAR).count()} Projects")
        self.stdout.write(f"  - {Panel.objects.filter(academic_year=YEAR).count()} Panels")
        self.stdout.write(f"\nDefault password for all users: {DEMO_PASSWORD}")

    def create_role_groups(self):
        """Create Django auth groups for roles."""
        for role in Role:
            AuthGroup.objects.get_or_create(name=role.value)
        self.stdout.write("  Role groups created/verified")

    def create_master_data(self):
        school, _ = School.objects.get_or_create(code=SCHOOL, defaults={"name": "School of Computer Science"})
        Department.objects.get_or_create(school=school, code=DEPARTMENT, defaults={"name": "Computer Science"})
        AcademicYear.objects.get_or_create(year=YEAR, defaults={"is_active": True})
        upsert_department_config(
            YEAR,
            SCHOOL,
            DEPARTMENT,
            min_panel_size=2,
            max_panel_size=3,
            min_team_size=1,
            max_team_size=3,
        )
        self.stdout.write(f"  Created master data: {SCHOOL}/{DEPARTMENT} {YEAR}")

    def create_people(self) -> User:
        admin = create_admin(
            {
                "employee_id": "A0001",
                "name": "Portal Admin",
                "email_id": "admin@capstone.edu",
                "password": DEMO_PASSWORD,
            }
        ).user
        for employee_id, name, specializations in FACULTY_DATA:
            create_faculty(
                {
                    "employee_id": employee_id,
                    "name": name,
                    "email_id": f"{employee_id.lower()}@capstone.edu",
                    "password": DEMO_PASSWORD,
                    "schools": [SCHOOL],
                    "departments": [DEPARTMENT],
                    "specializations": specializations,
                },
                created_by=admin,
            )
            self.stdout.write(f"  Created faculty: {employee_id} {name}")

        assign_coordinator(FACULTY_DATA[0][0], YEAR, SCHOOL, DEPARTMENT, is_primary=True, assigned_by=admin)

        result = upload_students(
            [
                {"reg_no": reg_no, "name": name, "email_id": f"{reg_no.lower()}@students.capstone.edu"}
                for reg_no, name in STUDENT_DATA
            ],
            YEAR,
            SCHOOL,
            DEPARTMENT,
            uploaded_by=admin,
        )
        self.stdout.write(f"  Uploaded students: {result.created} created")
        return admin

    def create_projects(self, admin: User):
        teams = [
            ("Retrieval-augmented campus assistant", "F1001", "AI/ML", STUDENT_DATA[0:2]),
            ("Phishing detection browser extension", "F1004", "Security", STUDENT_DATA[2:4]),
            ("Federated learning for clinics", "F1002", "AI/ML", STUDENT_DATA[4:6]),
        ]
        for name, guide, specialization, members in teams:
            create_project(
                {
                    "name": name,
                    "academic_year": YEAR,
                    "school": SCHOOL,
                    "department": DEPARTMENT,
                    "guide_employee_id": guide,
                    "student_reg_nos": [reg_no for reg_no, _ in members],
                    "specialization": specialization,
                    "project_type": "software",
                },
                created_by=admin,
            )
            self.stdout.write(f"  Created project: {name}")

        created = auto_create_panels([DEPARTMENT], SCHOOL, YEAR, panel_size=2, created_by=admin)
        assigned = auto_assign_panels_to_projects(YEAR, SCHOOL, DEPARTMENT, assigned_by=admin)
        self.stdout.write(f"  Panels: {created.created} created, {assigned.assigned} projects assigned")

    def create_marking_schema(self, admin: User):
        deadline = (timezone.now() + timedelta(days=30)).isoformat()
        upsert_marking_schema(
            YEAR,
            SCHOOL,
            DEPARTMENT,
            [
                {
                    "review_name": "review1",
                    "display_name": "Review 1",
                    "faculty_type": "guide",
                    "deadline": deadline,
                    "requires_ppt": False,
                    "components": [
                        {
                            "component_id": "problem",
                            "name": "Problem definition",
                            "description": "",
                            "max_marks": 10,
                            "levels": REVIEW_LEVELS,
                        },
                        {
                            "component_id": "design",
                            "name": "System design",
                            "description": "",
                            "max_marks": 10,
                            "levels": REVIEW_LEVELS,
                        },
                    ],
                },
                {
                    "review_name": "review2",
                    "display_name": "Review 2",
                    "faculty_type": "panel",
                    "deadline": deadline,
                    "requires_ppt": True,
                    "components": [
                        {
                            "component_id": "demo",
                            "name": "Implementation demo",
                            "description": "",
                            "max_marks": 20,
                            "levels": REVIEW_LEVELS,
                        },
                    ],
                },
            ],
            updated_by=admin,
        )
        self.stdout.write("  Created marking schema with 2 reviews")

    def create_broadcast(self, admin: User):
        BroadcastMessage.objects.create(
            title="Review 1 schedule",
            message="Review 1 marks must be entered before the deadline shown on your dashboard.",
            target_schools=[SCHOOL],
            created_by=admin,
            created_by_employee_id="A0001",
            created_by_name="Portal Admin",
            expires_at=timezone.now() + timedelta(days=14),
        )
        self.stdout.write("  Created broadcast")

    def clear_demo_data(self):
        """Clear existing demo data."""
        self.stdout.write("Clearing existing demo data...")

        scope = {"academic_year": YEAR, "school": SCHOOL, "department": DEPARTMENT}
        # Projects reference panels and faculty with PROTECT
        Project.objects.filter(**scope).delete()
        Panel.objects.filter(**scope).delete()
        MarkingSchema.objects.filter(**scope).delete()
        ProjectCoordinator.objects.filter(**scope).delete()
        DepartmentConfig.objects.filter(**scope).delete()
        Student.objects.filter(**scope).delete()
        BroadcastMessage.objects.filter(created_by__email="admin@capstone.edu").delete()

        employee_ids = ["A0001"] + [employee_id for employee_id, _, _ in FACULTY_DATA]
        User.objects.filter(faculty_profile__employee_id__in=employee_ids).delete()

        self.stdout.write(self.style.WARNING("  Demo data cleared"))
