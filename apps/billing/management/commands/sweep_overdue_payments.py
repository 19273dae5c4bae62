from django.core.management.base import BaseCommand

from apps.billing.services import AccessGate
from ._period_options import add_period_arguments, parse_now, period_from_options


class Command(BaseCommand):
    help = 'Lock accounts with overdue unpaid payments and unlock accounts that have paid'

    def add_arguments(self, parser):
        add_period_arguments(parser)
        parser.add_argument(
            '--now',
            help='Evaluate as of this ISO-8601 timestamp instead of the current time',
        )

    def handle(self, *args, **options):
        now = parse_now(options.get('now'))
        period = period_from_options(options, now=now)

        result = AccessGate().sweep_overdue(period, now=now)

        if result.healed:
            self.stdout.write(
                self.style.WARNING(f'Healed {result.healed} account(s) locked without an overdue payment')
            )

        self.stdout.write(
            self.style.SUCCESS(
                f'Sweep complete for {period}: {result.locked} locked, {result.unlocked} unlocked'
            )
        )
