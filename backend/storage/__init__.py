from core.config import Settings

from .base import InventoryStorage
from .database import DatabaseInventoryStorage
from .memory import MemoryInventoryStorage

BACKENDS = ("memory", "database")


def build_storage(settings: Settings) -> InventoryStorage:
    """Pick the store named by STORAGE_BACKEND."""
    if settings.storage_backend == "memory":
        return MemoryInventoryStorage(seed=settings.seed_sample_data)
    if settings.storage_backend == "database":
        return DatabaseInventoryStorage(
            settings.async_database_url,
            echo=settings.database_echo,
            seed=settings.seed_sample_data,
        )
    raise ValueError(
        f"Unknown STORAGE_BACKEND {settings.storage_backend!r}; expected one of {', '.join(BACKENDS)}"
    )


__all__ = [
    "BACKENDS",
    "DatabaseInventoryStorage",
    "InventoryStorage",
    "MemoryInventoryStorage",
    "build_storage",
]
