from django.core.management.color import no_style
from django.db import migrations

OBJECT_ROOT_ID = 1


def create_root_folders(apps, schema_editor):
    Folder = apps.get_model('catalog', 'Folder')
    Folder.objects.get_or_create(id=OBJECT_ROOT_ID, defaults={'tree': 'object', 'path': '/'})

    # The explicit id does not advance sequence-backed keys (PostgreSQL).
    connection = schema_editor.connection
    for sql in connection.ops.sequence_reset_sql(no_style(), [Folder]):
        schema_editor.execute(sql)

    Folder.objects.get_or_create(tree='asset', path='/')


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_root_folders, migrations.RunPython.noop),
    ]
