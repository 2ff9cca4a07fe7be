from django.apps import AppConfig


class TandaPaymentsConfig(AppConfig):
    name = 'tanda'
    verbose_name = 'Tanda Payments'
