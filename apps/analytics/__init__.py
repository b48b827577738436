"""
Analytics App - Sales Summaries

Read-only aggregations over invoices: daily totals for the dashboard, a
customer's lifetime spend and the filtered invoice list.
"""
