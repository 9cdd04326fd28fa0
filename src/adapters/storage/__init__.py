"""
Adaptateurs de stockage local.

- DiskSavedItemsStore : liste "My List" persistée via diskcache
"""

from src.adapters.storage.saved_items_store import DiskSavedItemsStore

__all__ = [
    "DiskSavedItemsStore",
]
