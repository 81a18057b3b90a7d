import factory
from factory.django import DjangoModelFactory

from capstone_backend.users.models import User

TEST_PASSWORD = "testpass123"


class UserFactory(DjangoModelFactory):
    email = factory.Sequence(lambda n: f"user{n}@capstone.edu")
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    password = factory.PostGenerationMethodCall("set_password", TEST_PASSWORD)

    class Meta:
        model = User
        django_get_or_create = ["email"]
        skip_postgeneration_save = True

    @factory.post_generation
    def save_password(obj, create, extracted, **kwargs):
        if create:
            obj.save()
