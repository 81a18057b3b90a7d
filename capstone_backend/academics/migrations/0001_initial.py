# Generated manually on 2026-10-19

import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='School',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('code', models.CharField(max_length=50, unique=True, verbose_name='code')),
                ('name', models.CharField(max_length=200, verbose_name='name')),
            ],
            options={
                'verbose_name': 'school',
                'verbose_name_plural': 'schools',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='AcademicYear',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('year', models.CharField(help_text='Academic year in YYYY-YYYY form', max_length=9, unique=True, verbose_name='year')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
            ],
            options={
                'verbose_name': 'academic year',
                'verbose_name_plural': 'academic years',
                'ordering': ['-year'],
            },
        ),
        migrations.CreateModel(
            name='Department',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('code', models.CharField(max_length=100, verbose_name='code')),
                ('name', models.CharField(max_length=200, verbose_name='name')),
                ('school', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='departments', to='academics.school', verbose_name='school')),
            ],
            options={
                'verbose_name': 'department',
                'verbose_name_plural': 'departments',
                'ordering': ['school__code', 'code'],
                'constraints': [models.UniqueConstraint(fields=('school', 'code'), name='unique_department_per_school')],
            },
        ),
        migrations.CreateModel(
            name='DepartmentConfig',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('academic_year', models.CharField(db_index=True, help_text='Academic year in YYYY-YYYY form', max_length=9, verbose_name='academic year')),
                ('school', models.CharField(db_index=True, max_length=50, verbose_name='school')),
                ('department', models.CharField(db_index=True, max_length=100, verbose_name='department')),
                ('min_panel_size', models.PositiveSmallIntegerField(default=1, verbose_name='minimum panel size')),
                ('max_panel_size', models.PositiveSmallIntegerField(default=5, verbose_name='maximum panel size')),
                ('min_team_size', models.PositiveSmallIntegerField(default=1, verbose_name='minimum team size')),
                ('max_team_size', models.PositiveSmallIntegerField(default=4, verbose_name='maximum team size')),
            ],
            options={
                'verbose_name': 'department configuration',
                'verbose_name_plural': 'department configurations',
                'constraints': [
                    models.UniqueConstraint(fields=('academic_year', 'school', 'department'), name='unique_department_config_scope'),
                    models.CheckConstraint(condition=models.Q(('min_panel_size__lte', models.F('max_panel_size'))), name='department_config_panel_bounds'),
                    models.CheckConstraint(condition=models.Q(('min_team_size__lte', models.F('max_team_size'))), name='department_config_team_bounds'),
                ],
            },
        ),
    ]
