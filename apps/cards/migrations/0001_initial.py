# Generated manually for cards app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DiscountCard',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('comment', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='discount_cards', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'discount_cards',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['owner', 'name'], name='cards_owner_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='CardIdentifier',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('manual', 'Manual code'), ('screenshot', 'Screenshot')], default='manual', max_length=20)),
                ('value', models.CharField(blank=True, max_length=255)),
                ('image_path', models.CharField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('card', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='identifiers', to='cards.discountcard')),
            ],
            options={
                'db_table': 'card_identifiers',
                'ordering': ['created_at'],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('value', ''), _negated=True), fields=('value',), name='unique_card_identifier_value'),
                ],
            },
        ),
    ]
