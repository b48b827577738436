"""
Shareable invoice text.

Builds the plain-text WhatsApp message for an invoice and the ``wa.me``
link that opens a chat with the customer with the message prefilled.
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from urllib.parse import quote

from django.utils import timezone

from apps.catalog.models import Category
from apps.catalog.services import resolve_category_label
from .calculator import CENT

SEPARATOR = '----------------------------'
COUNTRY_CODE = '91'
WHATSAPP_URL = 'https://wa.me/{phone}?text={text}'


def _group_indian(integer_digits: str) -> str:
    """'1234567' -> '12,34,567' (last three digits, then pairs)."""
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ','.join(pairs + [tail])


def format_currency(amount, currency: str = 'INR') -> str:
    """
    Render an amount for display.

    INR uses ``Rs.`` and Indian digit grouping (``Rs. 1,23,456.00``); any
    other currency code is prefixed as-is (``USD 123.45``).
    """
    value = Decimal(str(amount or 0)).quantize(CENT, rounding=ROUND_HALF_UP)
    if currency != 'INR':
        return f"{currency} {value:.2f}"

    sign = '-' if value < 0 else ''
    integer_part, fraction = f"{abs(value):.2f}".split('.')
    return f"Rs. {sign}{_group_indian(integer_part)}.{fraction}"


def _format_percent(value) -> str:
    return format(Decimal(str(value)).normalize(), 'f')


def _format_date(moment) -> str:
    local = timezone.localtime(moment) if moment else timezone.localtime()
    return f"{local.day}/{local.month}/{local.year}"


def generate_invoice_message(invoice, shop, categories=None) -> str:
    """
    Build the WhatsApp text for an invoice.

    Args:
        invoice: Invoice instance
        shop: ShopSettings instance
        categories: Categories used for item labels; stored ones when None

    Returns:
        Newline-joined message text
    """
    if categories is None:
        categories = list(Category.objects.all())

    currency = shop.currency
    lines = [
        f"*{shop.shop_name}*",
        "_Find your signature look_",
    ]
    if shop.address:
        lines.append(shop.address)
    if shop.phone:
        lines.append(f"Tel: {shop.phone}")
    if shop.gst_number:
        lines.append(f"GST: {shop.gst_number}")

    lines += [
        "",
        SEPARATOR,
        f"*INVOICE: {invoice.invoice_number}*",
        f"Date: {_format_date(invoice.created_at)}",
        SEPARATOR,
        "",
        f"*Customer:* {invoice.customer_name}",
        f"*Phone:* {invoice.customer_phone}",
        "",
        "*Items:*",
        "",
    ]

    for index, item in enumerate(invoice.items, start=1):
        label = resolve_category_label(item.get('category', ''), categories)
        description = f" - {item['description']}" if item.get('description') else ""
        lines.append(f"{index}. {label}{description}")
        lines.append(
            f"   Qty: {item.get('quantity', 1)} x "
            f"{format_currency(item.get('unit_price'), currency)} = "
            f"{format_currency(item.get('line_total'), currency)}"
        )

    lines += [
        "",
        SEPARATOR,
        f"*Subtotal:* {format_currency(invoice.subtotal, currency)}",
    ]

    if invoice.discount_value > 0:
        if invoice.discount_type == 'percent':
            discount_label = f"{_format_percent(invoice.discount_value)}%"
        else:
            discount_label = format_currency(invoice.discount_value, currency)
        lines.append(
            f"*Discount ({discount_label}):* -{format_currency(invoice.discount_amount, currency)}"
        )

    lines += [
        "",
        f"*TOTAL: {format_currency(invoice.total, currency)}*",
        SEPARATOR,
        "",
        "Thank you for shopping with us :)",
        "",
        "_Exchange is applicable only within 2 days_",
        "_No exchange on jewellery and sale items._",
    ]

    return "\n".join(lines)


def whatsapp_phone(phone: str) -> str:
    """
    Digits only, in international form.

    Every 10-digit local number gets the 91 country code, even one that
    itself starts with 91. Other lengths, such as
    12-digit numbers already starting with 91, are kept as they are.
    """
    digits = re.sub(r'\D', '', phone or '')
    if digits.startswith('0'):
        return COUNTRY_CODE + digits[1:]
    if len(digits) == 10:
        return COUNTRY_CODE + digits
    return digits


def build_whatsapp_link(invoice, shop, categories=None) -> str:
    message = generate_invoice_message(invoice, shop, categories)
    return WHATSAPP_URL.format(
        phone=whatsapp_phone(invoice.customer_phone),
        text=quote(message, safe="!~*'()"),
    )
