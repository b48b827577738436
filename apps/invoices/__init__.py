"""
Invoices App - Billing

Invoices embed their line items, snapshot the customer's name and phone at
creation, and take a sequential number from the shop settings counter.
All money is computed server-side from the items and discount.
"""
