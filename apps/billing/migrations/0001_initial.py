import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PaymentRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('month', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(12)])),
                ('year', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(2020), django.core.validators.MaxValueValidator(2100)])),
                ('amount', models.DecimalField(decimal_places=2, help_text='Grade fee at creation; follows fee changes while unpaid', max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('status', models.CharField(choices=[('UNPAID', 'Unpaid'), ('PAID', 'Paid')], default='UNPAID', max_length=10)),
                ('due_date', models.DateField(help_text='First day of the period plus the grace period')),
                ('paid_date', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='students.student')),
            ],
            options={
                'db_table': 'payment_records',
                'ordering': ['-year', '-month', 'id'],
                'indexes': [
                    models.Index(fields=['year', 'month', 'status'], name='payment_period_status_idx'),
                    models.Index(fields=['status', 'due_date'], name='payment_status_due_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('student', 'year', 'month'), name='unique_student_payment_period'),
                ],
            },
        ),
    ]
