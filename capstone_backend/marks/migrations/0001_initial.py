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
        ('projects', '0001_initial'),
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MarkingSchema',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('academic_year', models.CharField(db_index=True, help_text='Academic year in YYYY-YYYY form', max_length=9, verbose_name='academic year')),
                ('school', models.CharField(db_index=True, max_length=50, verbose_name='school')),
                ('department', models.CharField(db_index=True, max_length=100, verbose_name='department')),
                ('reviews', models.JSONField(default=list, verbose_name='reviews')),
            ],
            options={
                'verbose_name': 'marking schema',
                'verbose_name_plural': 'marking schemas',
                'constraints': [models.UniqueConstraint(fields=('academic_year', 'school', 'department'), name='unique_marking_schema_scope')],
            },
        ),
        migrations.CreateModel(
            name='Marks',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('review_name', models.CharField(max_length=100, verbose_name='review')),
                ('faculty_type', models.CharField(choices=[('guide', 'Guide'), ('panel', 'Panel')], max_length=10, verbose_name='faculty type')),
                ('component_marks', models.JSONField(default=dict, help_text='Criterion id to rubric level score', verbose_name='component marks')),
                ('total_marks', models.DecimalField(decimal_places=2, default=0, max_digits=7, verbose_name='total marks')),
                ('max_total_marks', models.DecimalField(decimal_places=2, default=0, max_digits=7, verbose_name='maximum total')),
                ('attendance', models.CharField(choices=[('present', 'Present'), ('absent', 'Absent')], default='present', max_length=10, verbose_name='attendance')),
                ('pat', models.BooleanField(default=False, verbose_name='PAT')),
                ('is_submitted', models.BooleanField(default=False, verbose_name='submitted')),
                ('faculty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='marks_given', to='faculty.faculty', verbose_name='faculty')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='marks', to='projects.project', verbose_name='project')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='marks', to='students.student', verbose_name='student')),
            ],
            options={
                'verbose_name': 'marks',
                'verbose_name_plural': 'marks',
                'ordering': ['review_name', 'student__reg_no'],
                'constraints': [models.UniqueConstraint(fields=('student', 'faculty', 'review_name'), name='unique_marks_per_student_faculty_review')],
            },
        ),
        migrations.CreateModel(
            name='ReviewFeedback',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('review_name', models.CharField(max_length=100, verbose_name='review')),
                ('team_comment', models.TextField(verbose_name='team comment')),
                ('ppt_approved', models.BooleanField(default=False, verbose_name='PPT approved')),
                ('faculty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_feedback', to='faculty.faculty', verbose_name='faculty')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_feedback', to='projects.project', verbose_name='project')),
            ],
            options={
                'verbose_name': 'review feedback',
                'verbose_name_plural': 'review feedback',
                'constraints': [models.UniqueConstraint(fields=('project', 'faculty', 'review_name'), name='unique_feedback_per_project_faculty_review')],
            },
        ),
    ]
