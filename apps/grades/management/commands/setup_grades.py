from decimal import Decimal

from django.core.management.base import BaseCommand
from apps.grades.models import Grade


class Command(BaseCommand):
    help = 'Set up the initial grades (6 to 11) with their default monthly fees'

    DEFAULT_GRADES = [
        {'level': 6, 'name': 'Grade 6', 'monthly_fee': Decimal('4000')},
        {'level': 7, 'name': 'Grade 7', 'monthly_fee': Decimal('4500')},
        {'level': 8, 'name': 'Grade 8', 'monthly_fee': Decimal('5000')},
        {'level': 9, 'name': 'Grade 9', 'monthly_fee': Decimal('5500')},
        {'level': 10, 'name': 'Grade 10', 'monthly_fee': Decimal('6000')},
        {'level': 11, 'name': 'Grade 11', 'monthly_fee': Decimal('6500')},
    ]

    def handle(self, *args, **options):
        """Create missing grades; existing grades keep their current fee"""
        created_count = 0
        existing_count = 0

        for grade_data in self.DEFAULT_GRADES:
            grade, created = Grade.objects.get_or_create(
                level=grade_data['level'],
                defaults=grade_data
            )

            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Created grade: {grade.name} ({grade.monthly_fee})')
                )
            else:
                existing_count += 1
                self.stdout.write(
                    self.style.WARNING(f'Grade already exists: {grade.name} ({grade.monthly_fee})')
                )

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully set up grades: {created_count} created, {existing_count} already existed'
            )
        )
