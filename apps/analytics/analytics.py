"""
Analytics Module
=================

This module provides the read-only queries behind the dashboard and the
invoice list: daily sales totals, a customer's lifetime spend and the
filtered invoice list.

Classes:
    SalesAnalytics: Static methods for sales queries.

Key Features:
    - Daily summary of non-cancelled invoices (sales, count, paid, pending)
    - Customer lifetime total over all invoices, cancelled included
    - Invoice list filtering by text search, date range and status

Example:
    Dashboard numbers for today::

        from apps.analytics.analytics import SalesAnalytics

        summary = SalesAnalytics.daily_summary()
        print(f"Sales today: {summary['total_sales']}")
        print(f"Still pending: {summary['pending_amount']}")

Note:
    Calendar days are evaluated in the project ``TIME_ZONE``. The daily
    summary leaves cancelled invoices out while the lifetime total keeps
    them; both behaviours are relied on by the client.
"""

from datetime import datetime, time, timedelta
from decimal import Decimal

from django.db.models import Sum, Count, Q, DecimalField
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.customers.services import get_customer_by_id
from apps.invoices.models import Invoice, InvoiceStatus
from .exceptions import InvalidDateRangeError, InvalidRangeError

ZERO = Decimal('0.00')

DATE_RANGES = ('all', 'today', 'week', 'month', 'custom')
RANGE_DAYS = {'week': 7, 'month': 30}


def _money_sum(expression='total', **kwargs):
    return Coalesce(
        Sum(expression, **kwargs),
        ZERO,
        output_field=DecimalField(max_digits=14, decimal_places=2)
    )


def _start_of_day(day):
    return timezone.make_aware(datetime.combine(day, time.min))


class SalesAnalytics:
    """
    Aggregations over the invoice table.

    Methods:
        daily_summary: Totals for one calendar day, cancelled excluded.
        customer_lifetime_total: Sum of a customer's invoices, cancelled included.
        filter_invoices: Invoice queryset filtered the way the list screen does.

    Note:
        All summary methods return plain dictionaries, suitable for JSON
        serialization in API responses.
    """

    @staticmethod
    def daily_summary(day=None):
        """
        Summarize one day's non-cancelled invoices.

        Args:
            day (date, optional): Calendar day in the project time zone.
                Defaults to today.

        Returns:
            dict: A dictionary containing:
                - date (date): The day summarized.
                - total_sales (Decimal): Sum of totals.
                - invoice_count (int): Number of invoices.
                - paid_amount (Decimal): Sum of totals with status paid.
                - pending_amount (Decimal): Sum of totals with status pending.

        Example:
            Given invoices of 100 (paid), 200 (pending) and 50 (cancelled)
            on 2024-03-15::

                SalesAnalytics.daily_summary(date(2024, 3, 15))
                # {'total_sales': 300, 'invoice_count': 2,
                #  'paid_amount': 100, 'pending_amount': 200, ...}
        """
        if day is None:
            day = timezone.localdate()

        totals = (
            Invoice.objects
            .filter(created_at__date=day)
            .exclude(status=InvoiceStatus.CANCELLED)
            .aggregate(
                total_sales=_money_sum(),
                invoice_count=Count('id'),
                paid_amount=_money_sum(filter=Q(status=InvoiceStatus.PAID)),
                pending_amount=_money_sum(filter=Q(status=InvoiceStatus.PENDING)),
            )
        )

        return {'date': day, **totals}

    @staticmethod
    def customer_lifetime_total(customer_id):
        """
        Sum a customer's invoice totals across all statuses.

        Args:
            customer_id (UUID): The customer's unique identifier.

        Returns:
            dict: ``customer_id``, ``lifetime_total`` (Decimal) and
            ``invoice_count`` (int). A customer with no invoices gets zeros.

        Raises:
            CustomerNotFoundError: If the customer doesn't exist.
        """
        customer = get_customer_by_id(customer_id=customer_id)

        totals = Invoice.objects.filter(customer=customer).aggregate(
            lifetime_total=_money_sum(),
            invoice_count=Count('id'),
        )

        return {'customer_id': customer.id, **totals}

    @staticmethod
    def filter_invoices(
        search=None,
        date_range='all',
        date_from=None,
        date_to=None,
        status=None,
        queryset=None
    ):
        """
        Filter invoices for the list screen, newest first.

        Args:
            search (str, optional): Case-insensitive substring of customer
                name, customer phone or invoice number.
            date_range (str): One of all, today, week (last 7 days),
                month (last 30 days) or custom.
            date_from (date, optional): Custom range start, inclusive.
            date_to (date, optional): Custom range end, inclusive.
            status (str, optional): Exact status to keep.
            queryset (QuerySet, optional): Invoices to filter. Defaults to all.

        Returns:
            QuerySet: Matching invoices ordered by ``-created_at``.

        Raises:
            InvalidRangeError: If ``date_range`` is not a known range.
            InvalidDateRangeError: If a custom range ends before it starts.

        Note:
            week and month count back from the start of today, so
            ``week`` covers today plus the seven days before it.
        """
        if queryset is None:
            queryset = Invoice.objects.all()

        date_range = date_range or 'all'
        if date_range not in DATE_RANGES:
            raise InvalidRangeError(
                f"Invalid range: '{date_range}'. Valid options: {', '.join(DATE_RANGES)}"
            )

        if search and search.strip():
            term = search.strip()
            queryset = queryset.filter(
                Q(customer_name__icontains=term)
                | Q(customer_phone__icontains=term)
                | Q(invoice_number__icontains=term)
            )

        today_start = _start_of_day(timezone.localdate())

        if date_range == 'today':
            queryset = queryset.filter(created_at__gte=today_start)
        elif date_range in RANGE_DAYS:
            since = today_start - timedelta(days=RANGE_DAYS[date_range])
            queryset = queryset.filter(created_at__gte=since)
        elif date_range == 'custom':
            if date_from and date_to and date_from > date_to:
                raise InvalidDateRangeError("date_from must be on or before date_to")
            if date_from:
                queryset = queryset.filter(created_at__gte=_start_of_day(date_from))
            if date_to:
                queryset = queryset.filter(
                    created_at__lt=_start_of_day(date_to + timedelta(days=1))
                )

        if status:
            queryset = queryset.filter(status=status)

        return queryset.order_by('-created_at')
