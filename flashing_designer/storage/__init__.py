"""Persistent storage for the material catalog."""

from .catalog import MaterialCatalog, CatalogLoadError, CatalogSaveError

__all__ = ['MaterialCatalog', 'CatalogLoadError', 'CatalogSaveError']
