"""
Shop App - Shop Settings

A single-row settings table (primary key 1) holding the shop header used on
invoices and the invoice-number sequence.
"""
