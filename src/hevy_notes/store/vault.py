"""Filesystem note store over a directory of Markdown files."""

import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Tuple

from ..exceptions import NoteExistsError, NoteFormatError, NoteNotFoundError
from ..notes.front_matter import FrontMatterError, join_front_matter, split_front_matter
from .base import MetadataUpdate, NoteStore

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Collapse duplicate/trailing slashes and './' segments in a vault path."""
    parts = [p for p in PurePosixPath(path.replace("\\", "/")).parts if p not in ("", ".", "/")]
    return "/".join(parts)


class VaultStore(NoteStore):
    """Note store backed by a local vault directory."""

    def __init__(self, root: Path):
        """Initialize the store.

        Args:
            root: Vault directory. Created on first write if missing.
        """
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        normalized = normalize_path(path)
        if ".." in normalized.split("/"):
            raise ValueError(f"Path escapes the vault: {path}")
        return self.root / normalized

    def _load(self, path: str) -> Tuple[Dict[str, Any], str]:
        file_path = self._resolve(path)
        if not file_path.is_file():
            raise NoteNotFoundError(path)
        text = file_path.read_text(encoding="utf-8")
        try:
            return split_front_matter(text)
        except FrontMatterError as e:
            raise NoteFormatError(path, str(e)) from e

    async def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    async def read(self, path: str) -> str:
        file_path = self._resolve(path)
        if not file_path.is_file():
            raise NoteNotFoundError(path)
        return file_path.read_text(encoding="utf-8")

    async def create(self, path: str, content: str) -> None:
        file_path = self._resolve(path)
        if file_path.exists():
            raise NoteExistsError(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        logger.debug(f"Created note {normalize_path(path)}")

    async def delete(self, path: str) -> None:
        file_path = self._resolve(path)
        if file_path.is_file():
            file_path.unlink()
            logger.debug(f"Deleted note {normalize_path(path)}")

    async def ensure_folder(self, path: str) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    async def list_notes(self, folder: str) -> List[str]:
        folder_path = self._resolve(folder)
        if not folder_path.is_dir():
            return []
        prefix = normalize_path(folder)
        return sorted(
            f"{prefix}/{child.name}" if prefix else child.name
            for child in folder_path.iterdir()
            if child.is_file() and child.suffix == ".md"
        )

    async def read_metadata(self, path: str) -> Dict[str, Any]:
        data, _ = self._load(path)
        return data

    async def process_metadata(self, path: str, update: MetadataUpdate) -> None:
        data, remainder = self._load(path)
        update(data)
        self._resolve(path).write_text(join_front_matter(data, remainder), encoding="utf-8")
        logger.debug(f"Updated front matter of {normalize_path(path)}")
