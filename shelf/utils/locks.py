# shelf/utils/locks.py
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple


class _KeyEntry:
    __slots__ = ('lock', 'holders')

    def __init__(self):
        self.lock = threading.RLock()
        self.holders = 0


class KeyedLock:
    """Process-wide mutexes keyed by natural key (title, surname).

    Keys are acquired in sorted order so two callers holding overlapping
    key sets cannot deadlock. A key's mutex only lives while some thread
    holds or waits for it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._entries: Dict[str, _KeyEntry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def _checkout(self, key: str) -> _KeyEntry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = _KeyEntry()
                self._entries[key] = entry
            entry.holders += 1
            return entry

    def _checkin(self, key: str) -> None:
        with self._guard:
            entry = self._entries[key]
            entry.holders -= 1
            if entry.holders == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, *keys: str) -> Iterator[None]:
        acquired: List[Tuple[str, _KeyEntry]] = []
        try:
            for key in sorted(set(keys)):
                entry = self._checkout(key)
                try:
                    entry.lock.acquire()
                except BaseException:
                    self._checkin(key)
                    raise
                acquired.append((key, entry))
            yield
        finally:
            for key, entry in reversed(acquired):
                entry.lock.release()
                self._checkin(key)
