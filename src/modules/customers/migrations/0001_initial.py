from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CustomerRecord",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.CharField(
                        editable=False, max_length=64, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(max_length=254)),
                ("available_credit", models.FloatField(default=0)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["email"], name="customers_email_idx"),
                    models.Index(
                        fields=["available_credit"], name="customers_credit_idx"
                    ),
                ],
            },
        ),
    ]
