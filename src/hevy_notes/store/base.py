"""
Document store interface.

The engine only touches notes through this interface. Paths are
vault-relative POSIX strings such as 'HevyWorkouts/2024-03-05 - Push.md'.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List


MetadataUpdate = Callable[[Dict[str, Any]], None]


class NoteStore(ABC):
    """Abstract base class for path-addressed note storage."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether a file or folder exists at ``path``."""
        pass

    @abstractmethod
    async def read(self, path: str) -> str:
        """
        Read a note's full text.

        Raises:
            NoteNotFoundError: If there is no note at ``path``.
        """
        pass

    @abstractmethod
    async def create(self, path: str, content: str) -> None:
        """
        Create a new note.

        Raises:
            NoteExistsError: If a note already exists at ``path``.
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Delete a note; missing notes are ignored."""
        pass

    @abstractmethod
    async def ensure_folder(self, path: str) -> None:
        """Create a folder (and parents) if it does not exist."""
        pass

    @abstractmethod
    async def list_notes(self, folder: str) -> List[str]:
        """Paths of Markdown notes directly inside ``folder``, sorted by name."""
        pass

    @abstractmethod
    async def read_metadata(self, path: str) -> Dict[str, Any]:
        """Front matter of a note; empty when it has none."""
        pass

    @abstractmethod
    async def process_metadata(self, path: str, update: MetadataUpdate) -> None:
        """
        Read-modify-write a note's front matter.

        ``update`` mutates the mapping in place. The body is written back
        unchanged.
        """
        pass
