# Generated manually on 2026-10-19

import uuid

import django.db.models.deletion
import django.utils.timezone
import django_fsm
import model_utils.fields
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('faculty', '0001_initial'),
        ('panels', '0001_initial'),
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('academic_year', models.CharField(db_index=True, help_text='Academic year in YYYY-YYYY form', max_length=9, verbose_name='academic year')),
                ('school', models.CharField(db_index=True, max_length=50, verbose_name='school')),
                ('department', models.CharField(db_index=True, max_length=100, verbose_name='department')),
                ('name', models.CharField(max_length=300, verbose_name='name')),
                ('specialization', models.CharField(blank=True, max_length=200, verbose_name='specialization')),
                ('project_type', models.CharField(blank=True, help_text='e.g. software, hardware, research', max_length=50, verbose_name='type')),
                ('status', django_fsm.FSMField(choices=[('active', 'Active'), ('completed', 'Completed')], default='active', max_length=50, protected=True, verbose_name='status')),
                ('best_project', models.BooleanField(default=False, verbose_name='best project')),
                ('completed_at', models.DateTimeField(blank=True, null=True, verbose_name='completed at')),
                ('guide_faculty', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='guided_projects', to='faculty.faculty', verbose_name='guide')),
                ('panel', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='projects', to='panels.panel', verbose_name='panel')),
                ('students', models.ManyToManyField(related_name='projects', to='students.student', verbose_name='students')),
            ],
            options={
                'verbose_name': 'project',
                'verbose_name_plural': 'projects',
                'ordering': ['-created'],
            },
        ),
    ]
