# Generated manually for catalog app

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='category',
            name='category_id',
            field=models.SlugField(allow_unicode=True, unique=True),
        ),
    ]
