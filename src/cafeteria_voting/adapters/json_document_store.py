"""Single-file JSON document store backing every repository."""

import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from pathlib import Path
from uuid import uuid4

from cafeteria_voting.domain.errors import StorageError

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "menuItems", "votingSessions", "sessionMenuItems", "votes")

REQUIRED_FIELDS = {
    "users": ("id",),
    "menuItems": ("id",),
    "votingSessions": ("id", "startTime", "endTime"),
    "sessionMenuItems": ("id", "sessionId", "menuItemId"),
    "votes": ("id", "userId", "sessionId", "menuItemId"),
}

_TIMESTAMP_FIELDS = ("createdAt", "updatedAt", "startTime", "endTime")

Document = dict[str, list[dict[str, object]]]


def empty_document() -> Document:
    """Return a document with every collection present and empty."""
    return {name: [] for name in COLLECTIONS}


def new_id() -> str:
    """Generate an opaque record identifier."""
    return str(uuid4())


def utc_now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp stored in the document."""
    if not isinstance(value, str) or not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_date(value: object) -> date | None:
    if not isinstance(value, str) or not value:
        return None
    return date.fromisoformat(value[:10])


def to_json_value(value: object) -> object:
    """Convert domain values into their stored JSON form."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def is_usable_row(collection: str, row: object) -> bool:
    """Check that a stored row has its ids and parseable dates."""
    if not isinstance(row, dict):
        return False
    for name in REQUIRED_FIELDS[collection]:
        value = row.get(name)
        if not isinstance(value, str) or not value:
            return False
    try:
        for name in _TIMESTAMP_FIELDS:
            if row.get(name) is not None and parse_datetime(row[name]) is None:
                return False
        if row.get("birthDate") is not None and parse_date(row["birthDate"]) is None:
            return False
    except ValueError:
        return False
    return True


@dataclass
class JsonDocumentStore:
    """Holds the whole document in memory and rewrites it on every mutation.

    One re-entrant lock serializes every read and every read-modify-write, so
    repositories sharing a store never interleave their changes inside the
    process. The file is replaced atomically through a temporary sibling.
    """

    path: Path
    _data: Document = field(init=False, repr=False)
    _lock: threading.RLock = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._lock = threading.RLock()
        self._data = self._load()

    @classmethod
    def open(cls, path: str | Path) -> "JsonDocumentStore":
        """Open the store at ``path``, starting empty if nothing usable is there."""
        return cls(Path(path))

    @contextmanager
    def read(self) -> Iterator[Document]:
        """Yield the live document for a consistent read."""
        with self._lock:
            yield self._data

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the live document and persist it when the block succeeds."""
        with self._lock:
            yield self._data
            self._save()

    def snapshot(self) -> Document:
        """Return a deep copy of the current document."""
        with self._lock:
            return json.loads(json.dumps(self._data))

    def _load(self) -> Document:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(
                "No data file found, starting empty", extra={"path": str(self.path)}
            )
            return empty_document()
        except OSError:
            logger.warning(
                "Failed to read data file, starting empty",
                extra={"path": str(self.path)},
                exc_info=True,
            )
            return empty_document()
        try:
            loaded = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(
                "Malformed data file, starting empty", extra={"path": str(self.path)}
            )
            return empty_document()
        if not isinstance(loaded, dict):
            logger.warning(
                "Data file is not a JSON object, starting empty",
                extra={"path": str(self.path)},
            )
            return empty_document()
        document = empty_document()
        for name in COLLECTIONS:
            rows = loaded.get(name)
            if not isinstance(rows, list):
                continue
            document[name] = [row for row in rows if is_usable_row(name, row)]
            skipped = len(rows) - len(document[name])
            if skipped:
                logger.warning(
                    "Skipped unusable rows in data file",
                    extra={
                        "path": str(self.path),
                        "collection": name,
                        "count": skipped,
                    },
                )
        return document

    def _save(self) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(self._data, handle, indent=2)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.exception(
                "Failed to persist data file", extra={"path": str(self.path)}
            )
            raise StorageError() from exc
