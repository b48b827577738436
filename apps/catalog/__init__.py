"""
Catalog App - Product Categories and Products

Categories classify invoice line items by a stable ``category_id`` slug.
Invoices keep the slug string, so deleting a category never rewrites an
invoice; labels fall back to the built-in defaults and then to the raw slug.
"""
