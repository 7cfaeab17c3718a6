"""Note storage."""

from .base import MetadataUpdate, NoteStore
from .vault import VaultStore, normalize_path

__all__ = ["MetadataUpdate", "NoteStore", "VaultStore", "normalize_path"]
