"""Domain layer for purchasedesk application.

Services live in their own modules (``purchasedesk.domain.purchase_order`` and
so on) and are imported from there, so that the database layer can import
the entities without pulling the services in.
"""
