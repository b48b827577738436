"""
Invoice Calculator
==================

Pure functions that derive an invoice's money fields from its line items
and discount. Nothing here touches the database.

All arithmetic is done in ``Decimal`` and rounded to cents with
``ROUND_HALF_UP``. Inputs are parsed fail-soft: malformed or negative
prices count as zero and malformed quantities count as one, so the
calculator never raises on user input.

Rules:
    * ``line_total = quantity * unit_price``
    * items with ``unit_price == 0`` are dropped before summing
    * ``subtotal = sum(line_total)``
    * percent discount: ``subtotal * discount_value / 100``
    * fixed discount: ``discount_value`` (may exceed the subtotal)
    * ``total = max(0, subtotal - discount_amount)``

Example::

    from apps.invoices.services.calculator import compute_invoice_totals

    totals = compute_invoice_totals(
        [
            {'category': 'suit', 'quantity': 2, 'unit_price': '500'},
            {'category': 'top', 'quantity': 1, 'unit_price': '0'},
        ],
        discount_type='percent',
        discount_value='10',
    )
    # totals['subtotal'] == Decimal('1000.00')
    # totals['discount_amount'] == Decimal('100.00')
    # totals['total'] == Decimal('900.00')
    # len(totals['items']) == 1
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
HUNDRED = Decimal('100')

PERCENT = 'percent'
FIXED = 'fixed'


def parse_amount(value) -> Decimal:
    """Parse a money value; anything unusable or negative becomes 0.00."""
    if isinstance(value, bool) or value is None:
        return ZERO
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite() or amount < 0:
        return ZERO
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_quantity(value) -> int:
    """Parse a quantity; anything unusable or below one becomes 1."""
    if isinstance(value, bool) or value is None:
        return 1
    try:
        quantity = int(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return 1
    return quantity if quantity >= 1 else 1


def compute_line_total(quantity: int, unit_price: Decimal) -> Decimal:
    return (Decimal(quantity) * unit_price).quantize(CENT, rounding=ROUND_HALF_UP)


def qualifying_items(items) -> list:
    """
    Normalize line items and keep the ones with a positive unit price.

    Each returned item is a dict of ``category``, ``description``,
    ``quantity`` (int), ``unit_price`` (Decimal) and a freshly computed
    ``line_total`` (Decimal). Order is preserved.
    """
    result = []
    for item in items or []:
        unit_price = parse_amount(item.get('unit_price'))
        if unit_price <= 0:
            continue
        quantity = parse_quantity(item.get('quantity'))
        result.append({
            'category': str(item.get('category') or ''),
            'description': str(item.get('description') or '').strip(),
            'quantity': quantity,
            'unit_price': unit_price,
            'line_total': compute_line_total(quantity, unit_price),
        })
    return result


def compute_discount_amount(subtotal: Decimal, discount_type: str, discount_value) -> Decimal:
    """Percent of the subtotal for ``percent``; the flat value otherwise."""
    value = parse_amount(discount_value)
    if discount_type == PERCENT:
        return (subtotal * value / HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)
    return value


def compute_invoice_totals(items, discount_type: str = PERCENT, discount_value=ZERO) -> dict:
    """
    Compute subtotal, discount and total for a list of line items.

    Args:
        items: Iterable of item dicts with ``quantity`` and ``unit_price``
        discount_type: ``'percent'`` or ``'fixed'``
        discount_value: Percentage or flat amount

    Returns:
        dict with ``subtotal``, ``discount_amount``, ``total`` (Decimals)
        and ``items`` (the qualifying, normalized items)
    """
    kept = qualifying_items(items)
    subtotal = sum((item['line_total'] for item in kept), ZERO)
    discount_amount = compute_discount_amount(subtotal, discount_type, discount_value)
    total = max(ZERO, subtotal - discount_amount)

    return {
        'subtotal': subtotal,
        'discount_amount': discount_amount,
        'total': total,
        'items': kept,
    }
