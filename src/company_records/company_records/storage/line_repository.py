from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from ..core.exceptions import InvalidKeyError, MalformedLineError, NotFoundError, StorageError
from .codec import key_prefix
from .file_store import FileStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_valid_key(key) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def require_key(key, label: str) -> int:
    if not is_valid_key(key):
        raise InvalidKeyError(f"{label} must be an integer, got {key!r}")
    return key


class TaggedLineRepository(Generic[T]):
    """Linear-scan CRUD over the lines of one record type in a FileStore.

    Lines of other types and lines that fail to decode are never returned,
    but every mutation writes them back untouched.
    """

    tag: str = ""
    label: str = "Record"

    def __init__(
        self,
        store: FileStore,
        *,
        decode: Callable[[str], T],
        encode: Callable[[T], str],
        key_of: Callable[[T], int],
    ):
        self._store = store
        self._decode = decode
        self._encode = encode
        self._key_of = key_of

    def _try_decode(self, line: str) -> Optional[T]:
        if not line.startswith(self.tag):
            return None
        try:
            return self._decode(line)
        except MalformedLineError as e:
            logger.debug("Skipping malformed line: %s", e)
            return None

    def _list_all(self) -> List[T]:
        try:
            lines = self._store.read_lines()
        except StorageError as e:
            logger.warning("Could not list %s records, returning none: %s", self.tag, e)
            return []
        out: List[T] = []
        for line in lines:
            record = self._try_decode(line)
            if record is not None:
                out.append(record)
        return out

    def _get_by_key(self, key) -> Optional[T]:
        if not is_valid_key(key):
            logger.debug("Lookup with invalid %s key %r", self.tag, key)
            return None
        try:
            with self._store.iter_lines() as lines:
                for line in lines:
                    record = self._try_decode(line)
                    if record is not None and self._key_of(record) == key:
                        return record
        except StorageError as e:
            logger.warning("Could not look up %s %s: %s", self.tag, key, e)
        return None

    def _add(self, record: T) -> None:
        self._store.append_line(self._encode(record))
        logger.info("Added %s %s", self.tag, self._key_of(record))

    def _find_line(self, lines: List[str], key: int, *, by_prefix: bool) -> Tuple[int, T]:
        prefix = key_prefix(self.tag, key)
        for index, line in enumerate(lines):
            if by_prefix and not line.startswith(prefix):
                continue
            record = self._try_decode(line)
            if record is not None and self._key_of(record) == key:
                return index, record
        raise NotFoundError(f"{self.label} {key} not found")

    def _update(self, key, build: Callable[[T], T]) -> T:
        key = require_key(key, f"{self.label} ID")
        lines = self._store.read_lines()
        try:
            index, current = self._find_line(lines, key, by_prefix=True)
        except NotFoundError:
            # keys written as e.g. "07" or "+7" still decode to 7
            index, current = self._find_line(lines, key, by_prefix=False)

        updated = build(current)
        if self._key_of(updated) != key:
            raise InvalidKeyError(f"{self.label} ID can't be changed by an update")

        lines[index] = self._encode(updated)
        self._store.rewrite(lines)
        logger.info("Updated %s %s", self.tag, key)
        return updated

    def _delete(self, key) -> T:
        key = require_key(key, f"{self.label} ID")
        lines = self._store.read_lines()
        index, removed = self._find_line(lines, key, by_prefix=False)

        del lines[index]
        self._store.rewrite(lines)
        logger.info("Deleted %s %s", self.tag, key)
        return removed
