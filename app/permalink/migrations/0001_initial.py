from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='Permalink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('object_id', models.PositiveBigIntegerField()),
                ('seo', models.JSONField(blank=True, default=dict, help_text='Section name to SEO data, e.g. {"title": "Home", "meta": {"description": "..."}}.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('content_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
            ],
            options={
                'ordering': ['content_type', 'object_id'],
            },
        ),
        migrations.AddConstraint(
            model_name='permalink',
            constraint=models.UniqueConstraint(fields=('content_type', 'object_id'), name='unique_permalink_owner'),
        ),
    ]
