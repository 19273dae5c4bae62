from django.core.management.base import BaseCommand

from apps.billing.services import BatchGenerator
from ._period_options import add_period_arguments, period_from_options


class Command(BaseCommand):
    help = 'Create unpaid payment records for every active, approved student for a month'

    def add_arguments(self, parser):
        add_period_arguments(parser)

    def handle(self, *args, **options):
        period = period_from_options(options)
        self.stdout.write(f'Generating payment records for {period}...')

        result = BatchGenerator().generate(period)

        for grade_name, totals in result.per_grade.items():
            self.stdout.write(f'  {grade_name}: {totals["created"]} record(s), {totals["amount"]}')

        for failure in result.failed:
            self.stdout.write(
                self.style.ERROR(f'Failed for student {failure["student_id"]}: {failure["error"]}')
            )

        self.stdout.write(
            self.style.SUCCESS(
                f'Batch complete for {period}: {result.created} created, '
                f'{result.already_existed} already existed, {result.failed_count} failed'
            )
        )
