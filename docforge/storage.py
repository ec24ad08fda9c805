"""Storage backends for rendered documents.

The editor only ever calls ``save(data)``. Anything implementing that one
method can stand in for any other backend.
"""

from __future__ import annotations

import errno
import logging
import os
import sqlite3
import tempfile
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot record a rendered document."""


class Storage(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def save(self, data: str) -> None:
        """Durably record a rendered document.

        Args:
            data: The complete rendered document.

        Raises:
            StorageError: If the document could not be recorded.
        """


def _discard(temp_filename: Optional[str]) -> None:
    if temp_filename is None:
        return
    try:
        os.remove(temp_filename)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove temporary file {temp_filename}: {e}")


def write_atomic(path: str, content: str | bytes,
                 encoding: str = EditorConstants.DEFAULT_ENCODING) -> None:
    """Write content to path atomically.

    The content goes to a temporary file in the target directory which is
    then renamed over the target, so a failed write never leaves a partially
    written file behind and the previous content survives.

    Args:
        path: Destination file. Missing parent directories are created.
        content: Text (encoded with ``encoding``) or raw bytes.
        encoding: Encoding used when content is text.

    Raises:
        StorageError: If the file could not be written.
    """
    dir_name = os.path.dirname(path) or '.'
    binary = isinstance(content, bytes)
    temp_filename = None
    try:
        os.makedirs(dir_name, exist_ok=True)
        # Same directory keeps the rename on one filesystem
        with tempfile.NamedTemporaryFile(
            mode='wb' if binary else 'w',
            encoding=None if binary else encoding,
            dir=dir_name,
            prefix=EditorConstants.ATOMIC_SAVE_PREFIX,
            suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
            delete=False,
        ) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_filename, path)
    except PermissionError as e:
        _discard(temp_filename)
        raise StorageError(f"Permission denied saving {path}") from e
    except OSError as e:
        _discard(temp_filename)
        if e.errno == errno.ENOSPC:
            raise StorageError("No space left on device") from e
        raise StorageError(f"Cannot save to {path}: {e}") from e
    except UnicodeEncodeError as e:
        _discard(temp_filename)
        raise StorageError(f"Cannot encode document as {encoding}: {e}") from e
    except LookupError as e:
        _discard(temp_filename)
        raise StorageError(f"Unknown encoding {encoding}") from e


class FileStorage(Storage):
    """Write renderings to a single file, replacing it atomically."""

    def __init__(self, path: str = EditorConstants.DEFAULT_FILENAME,
                 encoding: str = EditorConstants.DEFAULT_ENCODING):
        self.path = path
        self.encoding = encoding

    def save(self, data: str) -> None:
        write_atomic(self.path, data, self.encoding)
        logger.info(f"Document saved to {self.path}")

    def __repr__(self) -> str:
        return f"FileStorage({self.path!r})"


class DatabaseStorage(Storage):
    """Append every rendering as a row in a SQLite table.

    The connection is opened with ``check_same_thread=False`` so one instance
    can back editors on several threads; saves are serialised with a lock.
    """

    _SCHEMA = (
        "CREATE TABLE IF NOT EXISTS documents ("
        " id INTEGER PRIMARY KEY AUTOINCREMENT,"
        " content TEXT NOT NULL,"
        " saved_at TEXT NOT NULL)"
    )

    def __init__(self, path: str = ":memory:"):
        self.path = path
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(path, check_same_thread=False)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {path}: {e}") from e
        try:
            self._conn.execute(self._SCHEMA)
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.close()
            raise StorageError(f"Cannot create schema in {path}: {e}") from e

    def save(self, data: str) -> None:
        saved_at = datetime.now(timezone.utc).isoformat()
        with self._lock:
            try:
                # Commits on success, rolls back on error
                with self._conn:
                    self._conn.execute(
                        "INSERT INTO documents (content, saved_at) VALUES (?, ?)",
                        (data, saved_at),
                    )
            except sqlite3.Error as e:
                raise StorageError(f"Cannot save to database {self.path}: {e}") from e
        logger.info(f"Document saved to database {self.path}")

    def _query_one(self, sql: str) -> Optional[tuple]:
        with self._lock:
            try:
                return self._conn.execute(sql).fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Cannot read database {self.path}: {e}") from e

    def latest(self) -> Optional[str]:
        """Return the most recently saved rendering, or None if there is none."""
        row = self._query_one("SELECT content FROM documents ORDER BY id DESC LIMIT 1")
        return row[0] if row else None

    def count(self) -> int:
        (total,) = self._query_one("SELECT COUNT(*) FROM documents")
        return total

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __repr__(self) -> str:
        return f"DatabaseStorage({self.path!r})"


def create_storage(backend: str, target: Optional[str] = None) -> Storage:
    """Build a storage backend by name.

    Args:
        backend: One of ``EditorConstants.BACKENDS``.
        target: Backend-specific destination (file or database path).
            Ignored by the terminal backend. Defaults per backend when None.

    Raises:
        ValueError: If the backend name is unknown.
    """
    if backend == "file":
        return FileStorage(target or EditorConstants.DEFAULT_FILENAME)
    if backend == "sqlite":
        return DatabaseStorage(target or EditorConstants.DEFAULT_DATABASE)
    # Lazy imports keep reportlab and blessed off the core import path
    if backend == "pdf":
        from .pdf_storage import PdfStorage
        return PdfStorage(target or EditorConstants.DEFAULT_PDF_FILENAME)
    if backend == "terminal":
        from .terminal import TerminalStorage
        return TerminalStorage()
    raise ValueError(
        f"Unknown storage backend {backend!r}; "
        f"expected one of {', '.join(EditorConstants.BACKENDS)}"
    )
