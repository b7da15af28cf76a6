"""
Persistance - lecture/écriture intégrale des memory modules sur disque.
"""

from .files import (
    store_module,
    retrieve_module,
    save_memory_module,
    load_memory_module,
)

__all__ = [
    "store_module",
    "retrieve_module",
    "save_memory_module",
    "load_memory_module",
]
