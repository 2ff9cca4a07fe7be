"""
Management command to send a Tanda C2B payment request.
"""

from django.core.management.base import BaseCommand, CommandError
from tanda.constants import UNKNOWN_PROVIDER
from tanda.exceptions import TandaException
from tanda.services.c2b_service import C2BService
from tanda.utils.carriers import service_provider


class Command(BaseCommand):
    help = 'Send a Tanda C2B payment request'

    def add_arguments(self, parser):
        parser.add_argument(
            '--phone',
            type=str,
            required=True,
            help='Customer phone number (e.g., 0712345678)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            help='Payment amount'
        )
        parser.add_argument(
            '--merchant-wallet',
            type=str,
            help='Merchant wallet receiving the payment'
        )
        parser.add_argument(
            '--endpoint',
            type=str,
            help='Tanda API endpoint for C2B requests'
        )
        parser.add_argument(
            '--result-url',
            type=str,
            help='URL Tanda posts the transaction result to'
        )
        parser.add_argument(
            '--org-id',
            type=str,
            default='',
            help='Organization ID assigned by Tanda'
        )
        parser.add_argument(
            '--service-provider',
            type=str,
            help='Service provider ID (detected from the phone number if not provided)'
        )
        parser.add_argument(
            '--mode',
            type=str,
            choices=['uat', 'live'],
            help='Deployment mode (defaults to TANDA_MODE)'
        )
        parser.add_argument(
            '--detect-only',
            action='store_true',
            help='Only detect the service provider without sending a request'
        )

    def handle(self, *args, **options):
        phone = options['phone']
        provider = options.get('service_provider') or service_provider(phone)

        self.stdout.write(self.style.SUCCESS('\n=== Tanda C2B Request ===\n'))

        if provider == UNKNOWN_PROVIDER:
            raise CommandError(f'Could not detect a service provider for {phone}')

        if options['detect_only']:
            self.stdout.write(f'Service provider: {provider}')
            return

        missing = [
            f"--{name.replace('_', '-')}"
            for name in ('amount', 'merchant_wallet', 'endpoint', 'result_url')
            if not options.get(name)
        ]
        if missing:
            raise CommandError(f"Missing required arguments: {', '.join(missing)}")

        config = {'mode': options['mode']} if options.get('mode') else {}

        try:
            service = C2BService(
                config,
                options['org_id'],
                options['result_url'],
                options['endpoint'],
                wait_for_token=True,
            )
        except TandaException as e:
            raise CommandError(f'Could not set up Tanda client: {e.message}')

        self.stdout.write('Sending request...')
        self.stdout.write(f'  Phone: {phone}')
        self.stdout.write(f'  Provider: {provider}')
        self.stdout.write(f"  Amount: {options['amount']}\n")

        funding = service.request({
            'serviceProviderId': provider,
            'merchantWallet': options['merchant_wallet'],
            'mobileNumber': phone,
            'amount': options['amount'],
        })
        service.client.close()

        style = self.style.SUCCESS if funding.transaction_id else self.style.WARNING
        self.stdout.write(style(f'\nStatus: {funding.response_status} {funding.response_message}'))
        self.stdout.write(f'  Reference: {funding.fund_reference}')
        self.stdout.write(f'  Transaction ID: {funding.transaction_id or "-"}')
