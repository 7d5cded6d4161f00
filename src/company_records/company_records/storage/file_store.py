from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..core.constants import FILE_ENCODING
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class FileStore:
    """Handle on the flat data file shared by the repositories.

    Note: No file object is kept open between calls. Each operation opens,
    uses and closes the file itself; the handle only carries the path and
    whether it has been closed.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._closed = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "FileStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def file_exists(self) -> bool:
        self._ensure_open()
        exists = self._path.is_file()
        if exists:
            logger.info("Data file %s found", self._path)
        else:
            logger.warning("Data file %s does not exist", self._path)
        return exists

    def create(self) -> bool:
        """Create an empty data file if missing. Returns True when created."""
        self._ensure_open()
        if self._path.exists():
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
        except OSError as e:
            raise StorageError(f"Could not create {self._path}: {e}") from e
        logger.info("Created empty data file %s", self._path)
        return True

    @contextmanager
    def iter_lines(self) -> Iterator[Iterator[str]]:
        """Stream the file line by line (``\\n`` stripped).

        Usage: ``with store.iter_lines() as lines: for line in lines: ...``
        """
        self._ensure_open()
        try:
            f = self._path.open("r", encoding=FILE_ENCODING, newline="")
        except OSError as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e
        try:
            yield (line[:-1] if line.endswith("\n") else line for line in f)
        except UnicodeDecodeError as e:
            raise StorageError(f"Could not decode {self._path}: {e}") from e
        finally:
            f.close()

    def read_lines(self) -> List[str]:
        """Whole file split on ``\\n``.

        Note: A ``\\r`` before the ``\\n`` stays part of the line, so lines
        written back by `rewrite` keep their original bytes.
        """
        self._ensure_open()
        try:
            with self._path.open("r", encoding=FILE_ENCODING, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def append_line(self, line: str) -> None:
        self._ensure_open()
        if not self._path.is_file():
            raise StorageError(f"Data file {self._path} does not exist")
        data = self._encode_lines([line])
        try:
            with self._path.open("ab") as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Could not write {self._path}: {e}") from e

    def rewrite(self, lines: Iterable[str]) -> None:
        """Replace the whole file (truncate and write, not atomic).

        The payload is encoded before the file is opened, so an unencodable
        field leaves the file untouched.
        """
        self._ensure_open()
        data = self._encode_lines(lines)
        try:
            with self._path.open("wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Could not write {self._path}: {e}") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.info("Data file %s closed", self._path)

    def _encode_lines(self, lines: Iterable[str]) -> bytes:
        try:
            return "".join(line + "\n" for line in lines).encode(FILE_ENCODING)
        except UnicodeError as e:
            raise StorageError(f"Could not encode data for {self._path}: {e}") from e

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError("Store is closed")
