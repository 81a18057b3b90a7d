# Generated manually on 2026-10-19

import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Faculty',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('employee_id', models.CharField(max_length=50, unique=True, verbose_name='employee id')),
                ('name', models.CharField(max_length=200, verbose_name='name')),
                ('email_id', models.EmailField(max_length=254, unique=True, verbose_name='email')),
                ('phone_number', models.CharField(blank=True, max_length=20, verbose_name='phone number')),
                ('role', models.CharField(choices=[('faculty', 'Faculty'), ('admin', 'Admin')], default='faculty', max_length=10, verbose_name='role')),
                ('schools', models.JSONField(blank=True, default=list, verbose_name='schools')),
                ('departments', models.JSONField(blank=True, default=list, verbose_name='departments')),
                ('specializations', models.JSONField(blank=True, default=list, help_text='Areas the faculty member can guide or review', verbose_name='specializations')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='faculty_profile', to=settings.AUTH_USER_MODEL, verbose_name='user')),
            ],
            options={
                'verbose_name': 'faculty member',
                'verbose_name_plural': 'faculty members',
                'ordering': ['employee_id'],
            },
        ),
    ]
