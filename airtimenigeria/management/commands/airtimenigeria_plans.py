"""
Management command to browse the AirtimeNigeria data plan catalog.
"""

from django.core.management.base import BaseCommand, CommandError

from airtimenigeria.client import AirtimeNigeriaClient
from airtimenigeria.constants import DEFAULT_CURRENCY, NetworkOperator, PriceType, PRICE_FIELDS
from airtimenigeria.exceptions import AirtimeNigeriaException
from airtimenigeria.utils.formatters import format_currency


class Command(BaseCommand):
    help = 'List AirtimeNigeria data plans'

    def add_arguments(self, parser):
        parser.add_argument(
            '--operator',
            type=str,
            choices=[o.value for o in NetworkOperator],
            help='Only list plans for this network operator'
        )
        parser.add_argument(
            '--package-code',
            type=str,
            help='Show a single plan with all its price tiers'
        )

    def handle(self, *args, **options):
        operator = options.get('operator')
        package_code = options.get('package_code')

        try:
            client = AirtimeNigeriaClient.from_settings()

            if package_code:
                plan = client.find_data_plan(package_code)
                if plan is None:
                    raise CommandError(f'Data plan not found: {package_code}')

                self.stdout.write(self.style.SUCCESS(f'\n{plan.plan_summary}'))
                self.stdout.write(f'  Operator: {plan.network_operator}')
                self.stdout.write(f'  Package code: {plan.package_code}')
                self.stdout.write(f'  Plan ID: {plan.plan_id}')
                self.stdout.write(f'  Validity: {plan.validity}')
                for price_type in PriceType:
                    price = getattr(plan, PRICE_FIELDS[price_type])
                    self.stdout.write(
                        f'  {price_type.value.title()} price: {format_currency(price, plan.currency or DEFAULT_CURRENCY.value)}'
                    )
                return

            if operator:
                plans = client.get_data_plans_by_operator(operator)
            else:
                response = client.get_data_plans()
                if not response.success:
                    raise CommandError(f'Failed to fetch data plans: {response.message or response.status}')
                plans = response.data

        except AirtimeNigeriaException as e:
            raise CommandError(f'Fetching data plans failed: {str(e)}')

        self.stdout.write(self.style.SUCCESS(f'\n{len(plans)} data plans\n'))
        for plan in plans:
            self.stdout.write(
                f'  [{plan.network_operator}] {plan.package_code}: {plan.plan_summary} '
                f'({plan.validity}) {format_currency(plan.regular_price, plan.currency or DEFAULT_CURRENCY.value)}'
            )
