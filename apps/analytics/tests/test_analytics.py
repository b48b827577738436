import pytest
import uuid
from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.utils import timezone

from apps.analytics.analytics import SalesAnalytics
from apps.analytics.exceptions import InvalidDateRangeError, InvalidRangeError
from apps.customers.services import CustomerNotFoundError
from apps.invoices.models import InvoiceStatus


def at(year, month, day, hour=12, minute=0):
    return timezone.make_aware(datetime(year, month, day, hour, minute))


@pytest.mark.django_db
class TestDailySummary:

    def test_cancelled_excluded_from_every_field(self, march_15_invoices):
        summary = SalesAnalytics.daily_summary(date(2024, 3, 15))

        assert summary['total_sales'] == Decimal('300.00')
        assert summary['invoice_count'] == 2
        assert summary['paid_amount'] == Decimal('100.00')
        assert summary['pending_amount'] == Decimal('200.00')

    def test_empty_day(self, march_15_invoices):
        summary = SalesAnalytics.daily_summary(date(2024, 1, 1))

        assert summary == {
            'date': date(2024, 1, 1),
            'total_sales': Decimal('0.00'),
            'invoice_count': 0,
            'paid_amount': Decimal('0.00'),
            'pending_amount': Decimal('0.00'),
        }

    def test_defaults_to_today(self, analytics_customer, make_invoice):
        make_invoice(analytics_customer, '75.00', InvoiceStatus.PAID)

        summary = SalesAnalytics.daily_summary()

        assert summary['date'] == timezone.localdate()
        assert summary['paid_amount'] == Decimal('75.00')

    def test_day_follows_configured_time_zone(self, settings, analytics_customer, make_invoice):
        settings.TIME_ZONE = 'Asia/Kolkata'
        # 20:00 UTC on the 14th is 01:30 on the 15th in India
        make_invoice(
            analytics_customer, '40.00', InvoiceStatus.PAID,
            datetime(2024, 3, 14, 20, 0, tzinfo=dt_timezone.utc)
        )

        assert SalesAnalytics.daily_summary(date(2024, 3, 15))['paid_amount'] == Decimal('40.00')
        assert SalesAnalytics.daily_summary(date(2024, 3, 14))['invoice_count'] == 0


@pytest.mark.django_db
class TestCustomerLifetimeTotal:

    def test_includes_cancelled(self, analytics_customer, analytics_other_customer, make_invoice):
        make_invoice(analytics_customer, '100.00', InvoiceStatus.PAID)
        make_invoice(analytics_customer, '50.00', InvoiceStatus.CANCELLED)
        make_invoice(analytics_other_customer, '500.00', InvoiceStatus.PAID)

        result = SalesAnalytics.customer_lifetime_total(analytics_customer.id)

        assert result['lifetime_total'] == Decimal('150.00')
        assert result['invoice_count'] == 2

    def test_customer_without_invoices(self, analytics_customer):
        result = SalesAnalytics.customer_lifetime_total(analytics_customer.id)

        assert result['lifetime_total'] == Decimal('0.00')
        assert result['invoice_count'] == 0

    def test_unknown_customer(self):
        with pytest.raises(CustomerNotFoundError):
            SalesAnalytics.customer_lifetime_total(uuid.uuid4())


@pytest.mark.django_db
class TestFilterInvoices:

    def numbers(self, queryset):
        return [invoice.invoice_number for invoice in queryset]

    def test_search_matches_name_phone_or_number(
        self, analytics_customer, analytics_other_customer, make_invoice
    ):
        make_invoice(analytics_customer, '10.00', number='NZ-00001')
        make_invoice(analytics_other_customer, '10.00', number='NZ-00002')

        assert self.numbers(SalesAnalytics.filter_invoices(search='SUNITA')) == ['NZ-00001']
        assert self.numbers(SalesAnalytics.filter_invoices(search='90909')) == ['NZ-00002']
        assert self.numbers(SalesAnalytics.filter_invoices(search='nz-00002')) == ['NZ-00002']
        assert len(SalesAnalytics.filter_invoices(search='   ')) == 2

    def test_named_ranges(self, analytics_customer, make_invoice):
        now = timezone.now()
        make_invoice(analytics_customer, '10.00', number='TODAY')
        make_invoice(analytics_customer, '10.00', number='FIVE-DAYS', created_at=now - timedelta(days=5))
        make_invoice(analytics_customer, '10.00', number='TWENTY-DAYS', created_at=now - timedelta(days=20))
        make_invoice(analytics_customer, '10.00', number='SIXTY-DAYS', created_at=now - timedelta(days=60))

        assert self.numbers(SalesAnalytics.filter_invoices(date_range='today')) == ['TODAY']
        assert self.numbers(SalesAnalytics.filter_invoices(date_range='week')) == [
            'TODAY', 'FIVE-DAYS'
        ]
        assert self.numbers(SalesAnalytics.filter_invoices(date_range='month')) == [
            'TODAY', 'FIVE-DAYS', 'TWENTY-DAYS'
        ]
        assert len(SalesAnalytics.filter_invoices(date_range='all')) == 4

    def test_custom_range_is_inclusive(self, march_15_invoices):
        result = SalesAnalytics.filter_invoices(
            date_range='custom',
            date_from=date(2024, 3, 14),
            date_to=date(2024, 3, 15),
        )

        assert [i.total for i in result] == [
            Decimal('50.00'), Decimal('200.00'), Decimal('100.00'), Decimal('999.00')
        ]

    def test_custom_range_open_ended(self, march_15_invoices):
        result = SalesAnalytics.filter_invoices(date_range='custom', date_from=date(2024, 3, 16))
        assert [i.total for i in result] == [Decimal('888.00')]

    def test_custom_range_reversed(self):
        with pytest.raises(InvalidDateRangeError):
            SalesAnalytics.filter_invoices(
                date_range='custom',
                date_from=date(2024, 3, 20),
                date_to=date(2024, 3, 1),
            )

    def test_unknown_range(self):
        with pytest.raises(InvalidRangeError):
            SalesAnalytics.filter_invoices(date_range='year')

    def test_filters_combine(self, march_15_invoices, analytics_other_customer, make_invoice):
        make_invoice(analytics_other_customer, '100.00', InvoiceStatus.PAID, at(2024, 3, 15, 10))

        result = SalesAnalytics.filter_invoices(
            search='sunita',
            date_range='custom',
            date_from=date(2024, 3, 15),
            date_to=date(2024, 3, 15),
            status=InvoiceStatus.PAID,
        )

        assert [i.total for i in result] == [Decimal('100.00')]
        assert result[0].customer_name == 'Sunita Desai'
