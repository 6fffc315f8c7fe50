"""Clients des API externes (catalogue)."""

from yachk.adapters.api.catalog_client import CatalogClient

__all__ = ["CatalogClient"]
