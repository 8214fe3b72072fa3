"""Catalog module."""

from .catalog import (
    QUICK_REACTION_COUNT,
    catalog_from_dict,
    default_catalog,
    load_catalog,
)

__all__ = [
    "QUICK_REACTION_COUNT",
    "catalog_from_dict",
    "default_catalog",
    "load_catalog",
]
