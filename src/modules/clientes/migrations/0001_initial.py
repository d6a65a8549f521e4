import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Cliente",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("data_de_alteracao", models.DateTimeField(auto_now=True)),
                ("nome", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254, unique=True)),
                (
                    "tipo_cliente",
                    models.CharField(
                        choices=[
                            ("Bronze", "Bronze"),
                            ("Prata", "Prata"),
                            ("Ouro", "Ouro"),
                        ],
                        default="Bronze",
                        max_length=10,
                    ),
                ),
                ("ativo", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "clientes",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["ativo"], name="clientes_ativo_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Telefone",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("ddd", models.CharField(max_length=3)),
                ("numero", models.CharField(max_length=10)),
                (
                    "tipo",
                    models.CharField(
                        choices=[("Fixo", "Fixo"), ("Celular", "Celular")],
                        default="Fixo",
                        max_length=10,
                    ),
                ),
                (
                    "cliente",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="telefones",
                        to="clientes.cliente",
                    ),
                ),
            ],
            options={
                "db_table": "telefones",
                "ordering": ["id"],
                "indexes": [
                    models.Index(
                        fields=["ddd", "numero"], name="telefones_ddd_numero_idx"
                    ),
                ],
            },
        ),
    ]
