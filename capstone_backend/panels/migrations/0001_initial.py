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
        ('faculty', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Panel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('academic_year', models.CharField(db_index=True, help_text='Academic year in YYYY-YYYY form', max_length=9, verbose_name='academic year')),
                ('school', models.CharField(db_index=True, max_length=50, verbose_name='school')),
                ('department', models.CharField(db_index=True, max_length=100, verbose_name='department')),
                ('panel_name', models.CharField(max_length=200, verbose_name='panel name')),
                ('venue', models.CharField(blank=True, max_length=200, verbose_name='venue')),
                ('specializations', models.JSONField(blank=True, default=list, verbose_name='specializations')),
                ('panel_type', models.CharField(choices=[('regular', 'Regular'), ('temporary', 'Temporary')], default='regular', max_length=10, verbose_name='panel type')),
                ('max_projects', models.PositiveIntegerField(default=10, verbose_name='maximum projects')),
                ('assigned_projects_count', models.PositiveIntegerField(default=0, verbose_name='assigned projects')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_panels', to=settings.AUTH_USER_MODEL, verbose_name='created by')),
            ],
            options={
                'verbose_name': 'panel',
                'verbose_name_plural': 'panels',
                'ordering': ['-created'],
                'constraints': [models.CheckConstraint(condition=models.Q(('assigned_projects_count__lte', models.F('max_projects'))), name='panel_assigned_within_capacity')],
            },
        ),
        migrations.CreateModel(
            name='PanelMember',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('role', models.CharField(choices=[('chair', 'Chair'), ('member', 'Member')], default='member', max_length=10, verbose_name='role')),
                ('position', models.PositiveSmallIntegerField(default=0, verbose_name='position')),
                ('faculty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='panel_memberships', to='faculty.faculty', verbose_name='faculty')),
                ('panel', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='panels.panel', verbose_name='panel')),
            ],
            options={
                'verbose_name': 'panel member',
                'verbose_name_plural': 'panel members',
                'ordering': ['panel', 'position'],
                'constraints': [models.UniqueConstraint(fields=('panel', 'faculty'), name='unique_panel_member')],
            },
        ),
        migrations.AddField(
            model_name='panel',
            name='members',
            field=models.ManyToManyField(related_name='panels', through='panels.PanelMember', to='faculty.faculty', verbose_name='members'),
        ),
    ]
