# Generated manually to back the Unicode-aware item search
from django.db import migrations, models


def fill_search_name(apps, schema_editor):
    Item = apps.get_model('catalog', 'Item')
    for item in Item.objects.all():
        item.search_name = item.name.casefold()
        item.save(update_fields=['search_name'])


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0002_default_category'),
    ]

    operations = [
        migrations.AddField(
            model_name='item',
            name='search_name',
            field=models.CharField(blank=True, default='', editable=False, max_length=400),
        ),
        migrations.RunPython(fill_search_name, migrations.RunPython.noop),
    ]
