# Generated manually for businesses app

import uuid
from django.conf import settings
from django.core.validators import MaxLengthValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Business',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=120)),
                ('description', models.TextField(blank=True, max_length=1000, validators=[MaxLengthValidator(1000)])),
                ('address', models.CharField(max_length=200)),
                ('phone', models.CharField(blank=True, max_length=50)),
                ('website', models.CharField(blank=True, max_length=300)),
                ('category_id', models.CharField(choices=[('cat-restaurant', 'Restaurant'), ('cat-cafe', 'Cafe'), ('cat-retail', 'Retail'), ('cat-fitness', 'Fitness'), ('cat-services', 'Services'), ('cat-beauty', 'Beauty & Spa'), ('cat-healthcare', 'Healthcare'), ('cat-education', 'Education'), ('cat-entertainment', 'Entertainment'), ('cat-automotive', 'Automotive'), ('cat-food', 'Food & Drink')], max_length=50)),
                ('google_map_url', models.URLField(blank=True, max_length=500)),
                ('photos', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='businesses', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'businesses',
                'ordering': ['-created_at', 'id'],
                'indexes': [
                    models.Index(fields=['owner', 'created_at'], name='businesses_owner_idx'),
                    models.Index(fields=['category_id'], name='businesses_category_idx'),
                ],
            },
        ),
    ]
