# Generated manually to seed the fallback category
from django.db import migrations

DEFAULT_CATEGORY_NAME = 'Без категории'


def create_default_category(apps, schema_editor):
    """Ensure the fallback category exists."""
    Category = apps.get_model('catalog', 'Category')
    Category.objects.get_or_create(
        name=DEFAULT_CATEGORY_NAME,
        defaults={'comment': 'Items whose category was deleted'},
    )


def reverse_default_category(apps, schema_editor):
    # Left in place; items may already point at it
    pass


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_default_category, reverse_default_category),
    ]
