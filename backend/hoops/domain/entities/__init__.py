from .hoop import (
    ACCEPTED_IMAGE_TYPES,
    Hoop,
    HoopAttributes,
    PendingUpload,
    extension_for,
    storage_key,
)

__all__ = [
    "ACCEPTED_IMAGE_TYPES",
    "Hoop",
    "HoopAttributes",
    "PendingUpload",
    "extension_for",
    "storage_key",
]
