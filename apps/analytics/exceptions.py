"""
Domain exceptions for analytics app.

These exceptions are raised by the analytics queries for invalid input,
separate from HTTP concerns.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── InvalidRangeError
    └── InvalidDateRangeError

Usage:
    from apps.analytics.exceptions import InvalidDateRangeError

    if date_from > date_to:
        raise InvalidDateRangeError("date_from must be on or before date_to")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Catch it in views to turn any analytics error into a 400:

        try:
            invoices = SalesAnalytics.filter_invoices(date_range='year')
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidRangeError(AnalyticsServiceError):
    """
    Raised when an unknown named date range is requested.

    Valid ranges are: all, today, week, month, custom.
    """

    pass


class InvalidDateRangeError(AnalyticsServiceError):
    """
    Raised when a custom date range is invalid.

    Typically when date_from is after date_to.

    Example:
        raise InvalidDateRangeError("date_from must be on or before date_to")
    """

    pass
