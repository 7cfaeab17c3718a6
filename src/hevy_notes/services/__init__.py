"""Services coordinating the API client and the note store."""

from .sync_service import NoteWriteResult, SyncResult, SyncService

__all__ = ["NoteWriteResult", "SyncResult", "SyncService"]
