import factory
from factory.django import DjangoModelFactory

from capstone_backend.faculty.tests.factories import ACADEMIC_YEAR
from capstone_backend.faculty.tests.factories import DEPARTMENT
from capstone_backend.faculty.tests.factories import SCHOOL
from capstone_backend.panels.models import MemberRole
from capstone_backend.panels.models import Panel
from capstone_backend.panels.models import PanelMember


class PanelFactory(DjangoModelFactory):
    """
    Panel of SCOPE/CSE.

    Pass ``members=[faculty, ...]`` to add members in order; the first
    one chairs the panel.
    """

    panel_name = factory.Sequence(lambda n: f"CSE-Panel-{n + 1}")
    academic_year = ACADEMIC_YEAR
    school = SCHOOL
    department = DEPARTMENT
    specializations = factory.LazyFunction(lambda: ["AI/ML"])
    max_projects = 10

    class Meta:
        model = Panel
        skip_postgeneration_save = True

    @factory.post_generation
    def members(obj, create, extracted, **kwargs):
        if not create or not extracted:
            return
        for position, faculty in enumerate(extracted):
            PanelMember.objects.create(
                panel=obj,
                faculty=faculty,
                position=position,
                role=MemberRole.CHAIR if position == 0 else MemberRole.MEMBER,
            )
