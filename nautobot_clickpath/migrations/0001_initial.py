import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="NavigationState",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True
                    ),
                ),
                (
                    "allowed_navs",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Links offered by the last rendered page",
                        verbose_name="Allowed Navigation",
                    ),
                ),
                (
                    "allowed_navs_cache",
                    models.JSONField(
                        blank=True,
                        null=True,
                        help_text="Cached copy of the allowed navigation, replayed without re-authorization",
                        verbose_name="Cached Navigation",
                    ),
                ),
                ("last_updated", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="navigation_state",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Navigation State",
                "verbose_name_plural": "Navigation States",
                "ordering": ["user"],
            },
        ),
    ]
