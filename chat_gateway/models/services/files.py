"""
In-memory file registry backing chat attachments.

Uploads are registered here and referenced from chat requests by ``file_id``.
In production this would be a database collection; in-memory is fine for
development and single-process deployments.
"""

import uuid
import logging
import threading
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass
class FileRecord:
    """Metadata for an uploaded file; content is kept out of serialized output."""
    file_id: str
    filename: str
    type: str
    size: int
    created_at: datetime
    updated_at: datetime
    usage: int = 0
    width: Optional[int] = None
    height: Optional[int] = None
    content: Optional[bytes] = field(default=None, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("content")
        return data


class FileStore:
    """Thread-safe in-memory file storage."""

    def __init__(self):
        self._files: Dict[str, FileRecord] = {}
        self._lock = threading.Lock()

    def register(
        self,
        filename: str,
        content: bytes = b"",
        type: str = "application/octet-stream",
        file_id: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> FileRecord:
        now = datetime.utcnow()
        record = FileRecord(
            file_id=file_id or str(uuid.uuid4()),
            filename=filename,
            type=type,
            size=len(content),
            created_at=now,
            updated_at=now,
            width=width,
            height=height,
            content=content,
        )
        with self._lock:
            self._files[record.file_id] = record
        logger.info(f"Registered file {record.file_id} ({record.filename}, {record.size} bytes)")
        return record

    def get(self, file_id: str) -> Optional[FileRecord]:
        with self._lock:
            return self._files.get(file_id)

    def update_usage(self, file_id: str) -> Optional[FileRecord]:
        """Count one more use of a file; returns None for unknown ids."""
        with self._lock:
            record = self._files.get(file_id)
            if record is None:
                return None
            record.usage += 1
            record.updated_at = datetime.utcnow()
            return record

    def delete(self, file_id: str) -> bool:
        with self._lock:
            return self._files.pop(file_id, None) is not None

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "file_count": len(self._files),
                "total_bytes": sum(r.size for r in self._files.values()),
            }


def _file_id(descriptor: Union[Mapping[str, Any], Any]) -> Optional[str]:
    if isinstance(descriptor, Mapping):
        return descriptor.get("file_id")
    return getattr(descriptor, "file_id", None)


async def process_files(store: FileStore, files: Sequence[Union[Mapping[str, Any], Any]]) -> List[FileRecord]:
    """Resolve request file descriptors to records, counting each distinct file once."""
    seen = set()
    records = []
    for descriptor in files:
        file_id = _file_id(descriptor)
        if not file_id or file_id in seen:
            continue
        seen.add(file_id)
        record = store.update_usage(file_id)
        if record is None:
            logger.warning(f"Attachment {file_id} is not registered; skipping")
            continue
        records.append(record)
    return records
