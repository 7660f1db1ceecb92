"""Thing storage: pool creation, selection and movement."""

from touchfield.storage.store import ObjectStore

__all__ = [
    "ObjectStore",
]
