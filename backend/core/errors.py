from typing import Dict


class InventoryValidationError(ValueError):
    """Payload rejected before reaching storage.

    `errors` maps each offending field to a human readable message.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class StorageError(RuntimeError):
    """The backing store failed (connection lost, driver error, ...)."""
