import factory
from factory.django import DjangoModelFactory

from capstone_backend.faculty.tests.factories import ACADEMIC_YEAR
from capstone_backend.faculty.tests.factories import DEPARTMENT
from capstone_backend.faculty.tests.factories import SCHOOL
from capstone_backend.students.models import Student


class StudentFactory(DjangoModelFactory):
    reg_no = factory.Sequence(lambda n: f"22BCE{n:04d}")
    name = factory.Faker("name")
    email_id = factory.LazyAttribute(lambda o: f"{o.reg_no.lower()}@students.capstone.edu")
    academic_year = ACADEMIC_YEAR
    school = SCHOOL
    department = DEPARTMENT

    class Meta:
        model = Student
