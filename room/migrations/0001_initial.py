import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("hotel", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number", models.CharField(max_length=20)),
                ("type", models.CharField(max_length=50)),
                ("price_per_night", models.DecimalField(decimal_places=2, max_digits=10)),
                ("max_occupancy", models.PositiveIntegerField()),
                ("hotel", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="rooms",
                    to="hotel.hotel",
                )),
            ],
            options={
                "ordering": ("id",),
                "constraints": [
                    models.UniqueConstraint(fields=("hotel", "number"), name="unique_room_number_per_hotel"),
                    models.CheckConstraint(condition=models.Q(("price_per_night__gt", 0)), name="room_price_positive"),
                    models.CheckConstraint(condition=models.Q(("max_occupancy__gt", 0)), name="room_occupancy_positive"),
                ],
            },
        ),
    ]
