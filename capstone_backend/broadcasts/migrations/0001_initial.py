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
            name='BroadcastMessage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('title', models.CharField(blank=True, max_length=200, verbose_name='title')),
                ('message', models.TextField(verbose_name='message')),
                ('target_schools', models.JSONField(blank=True, default=list, verbose_name='target schools')),
                ('target_departments', models.JSONField(blank=True, default=list, verbose_name='target departments')),
                ('target_academic_years', models.JSONField(blank=True, default=list, verbose_name='target academic years')),
                ('created_by_employee_id', models.CharField(blank=True, max_length=50, verbose_name='creator employee id')),
                ('created_by_name', models.CharField(blank=True, max_length=200, verbose_name='creator name')),
                ('expires_at', models.DateTimeField(verbose_name='expires at')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('action', models.CharField(choices=[('notice', 'Notice'), ('block', 'Block')], default='notice', help_text="'block' notices stop faculty from working until dismissed", max_length=10, verbose_name='action')),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High'), ('urgent', 'Urgent')], default='medium', max_length=10, verbose_name='priority')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='broadcasts', to=settings.AUTH_USER_MODEL, verbose_name='created by')),
            ],
            options={
                'verbose_name': 'broadcast message',
                'verbose_name_plural': 'broadcast messages',
                'ordering': ['-created'],
            },
        ),
    ]
