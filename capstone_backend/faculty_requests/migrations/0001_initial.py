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
        ('projects', '0001_initial'),
        ('students', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FacultyRequest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('category', models.CharField(choices=[('guide', 'Guide'), ('panel', 'Panel')], max_length=10, verbose_name='category')),
                ('review_name', models.CharField(max_length=100, verbose_name='review')),
                ('message', models.TextField(verbose_name='message')),
                ('status', django_fsm.FSMField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=50, protected=True, verbose_name='status')),
                ('remarks', models.TextField(blank=True, verbose_name='remarks')),
                ('new_deadline', models.DateTimeField(blank=True, null=True, verbose_name='new deadline')),
                ('resolved_at', models.DateTimeField(blank=True, null=True, verbose_name='resolved at')),
                ('faculty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requests', to='faculty.faculty', verbose_name='faculty')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='faculty_requests', to='projects.project', verbose_name='project')),
                ('resolved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='resolved_requests', to=settings.AUTH_USER_MODEL, verbose_name='resolved by')),
                ('student', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='faculty_requests', to='students.student', verbose_name='student')),
            ],
            options={
                'verbose_name': 'faculty request',
                'verbose_name_plural': 'faculty requests',
                'ordering': ['-created'],
            },
        ),
    ]
