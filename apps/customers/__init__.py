"""
Customers App - Shop Customer Directory

Customers are identified by a normalized 10-digit phone number. Invoices keep
a snapshot of the customer's name and phone, so later edits here do not
rewrite past invoices.

Architecture:
- Models: Customer
- Services: customer_management (CRUD, phone normalization, delete guard)
- Views: CustomerViewSet with phone lookup action
"""
