"""
Catalog layer.

Responsibilities:
- Define the catalog item and user account schemas.
- Hold every item and account in an in-memory store for the process lifetime.
- Filter and sort the catalog for browsing.
"""
