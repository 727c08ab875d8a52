"""Catalog use cases (countries, animals)."""

from app.application.use_cases.catalog.catalog_operations import CatalogService

__all__ = ["CatalogService"]
