# Generated manually on 2026-10-19

import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations, models

import capstone_backend.coordinators.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('faculty', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProjectCoordinator',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('academic_year', models.CharField(db_index=True, help_text='Academic year in YYYY-YYYY form', max_length=9, verbose_name='academic year')),
                ('school', models.CharField(db_index=True, max_length=50, verbose_name='school')),
                ('department', models.CharField(db_index=True, max_length=100, verbose_name='department')),
                ('is_primary', models.BooleanField(default=False, verbose_name='primary')),
                ('permissions', models.JSONField(default=capstone_backend.coordinators.models.default_permissions, verbose_name='permissions')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('faculty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='coordinator_roles', to='faculty.faculty', verbose_name='faculty')),
            ],
            options={
                'verbose_name': 'project coordinator',
                'verbose_name_plural': 'project coordinators',
                'ordering': ['-is_primary', 'created'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('is_active', True)), fields=('faculty', 'academic_year', 'school', 'department'), name='unique_active_coordinator_per_scope')],
            },
        ),
    ]
