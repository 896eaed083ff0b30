"""Data access layer: the meet document loaded and saved as one unit."""
from __future__ import annotations

import json
import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterable, Iterator

from .exceptions import StorageError
from .models import Document, seed_document
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

DOCUMENT_KEY = "sportiva_2k26_db"


class MeetStore:
    """Owns the stored meet document.

    Every mutation goes through :meth:`transaction`, which loads a snapshot,
    lets the caller change it and writes it back only if the block finished
    without raising. The write lock is process-local; a multi-process
    deployment would replace it with a compare-and-swap on the stored blob.
    """

    def __init__(self, kv: KeyValueStore, key: str = DOCUMENT_KEY):
        self.kv = kv
        self.key = key
        self._lock = threading.RLock()
        self._last_id = 0

    def load(self) -> Document:
        """Return the stored document, seeding storage on first use."""

        with self._lock:
            raw = self.kv.get_item(self.key)
            if raw is None:
                document = seed_document()
                self.kv.set_item(self.key, self._encode(document))
                logger.info("Seeded meet document under %r", self.key)
                return document
        return self._decode(raw)

    def save(self, document: Document) -> None:
        """Replace the stored document entirely."""

        with self._lock:
            self.kv.set_item(self.key, self._encode(document))

    def reset(self) -> None:
        """Erase the stored document; the next load reseeds it."""

        with self._lock:
            self.kv.remove_item(self.key)
        logger.info("Meet document %r erased", self.key)

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        with self._lock:
            document = self.load()
            yield document
            self.save(document)

    def next_id(self, taken: Iterable[str] = ()) -> str:
        """Return a millisecond-clock id that is unique within the process and ``taken``."""

        taken = set(taken)
        with self._lock:
            candidate = max(int(time.time() * 1000), self._last_id + 1)
            while str(candidate) in taken:
                candidate += 1
            self._last_id = candidate
        return str(candidate)

    def _encode(self, document: Document) -> str:
        return json.dumps(document.to_dict())

    def _decode(self, raw: str) -> Document:
        try:
            return Document.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("Stored meet document %r is unreadable: %s", self.key, exc)
            raise StorageError("Stored meet data could not be read.") from exc
