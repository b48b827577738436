# Generated manually for shop app

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('shop', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='shopsettings',
            name='categories_seeded',
            field=models.BooleanField(default=False, editable=False),
        ),
    ]
