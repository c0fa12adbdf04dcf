# Generated manually for snack purchases

import uuid
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('teams', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Snack',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('food_item', models.CharField(max_length=200)),
                ('expense', models.DecimalField(decimal_places=2, max_digits=10)),
                ('total_contribution', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('note', models.TextField(blank=True)),
                ('date', models.DateField(default=django.utils.timezone.localdate)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='snacks', to='teams.team')),
            ],
            options={
                'db_table': 'snacks',
                'ordering': ['-date', '-created_at'],
                'indexes': [models.Index(fields=['team', 'date'], name='snacks_team_date_idx')],
            },
        ),
        migrations.CreateModel(
            name='SnackContribution',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('snack', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contributions', to='snacks.snack')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='snack_contributions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'snack_contributions',
                'ordering': ['id'],
            },
        ),
    ]
