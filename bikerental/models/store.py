import logging
import os
import pickle
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from bikerental.exceptions import DuplicateKeyError

log = logging.getLogger(__name__)

# ---- Paths ----
BASE_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_PATH = BASE_DIR / "data.pkl"

TABLES = ("users", "bicycles", "renters")


_MISSING = object()


class OrderedMap:
    """
    Key-value table keyed by opaque string ID, iterated in ascending key order.

    Records are plain dicts. Values are copied on the way in and out, so a
    caller can only change a stored record by inserting it again.

    Inside ``begin()``/``commit()``/``rollback()`` every write first records the
    key's prior value in an undo journal, so rolling back only touches the
    keys that changed.
    """

    def __init__(self, name: str, data: Optional[dict] = None):
        self.name = name
        self._data: dict[str, dict] = {k: dict(v) for k, v in (data or {}).items()}
        self._journals: list[dict] = []

    def _remember(self, key: str) -> None:
        if self._journals:
            journal = self._journals[-1]
            if key not in journal:
                journal[key] = self._data.get(key, _MISSING)

    def get(self, key: str) -> Optional[dict]:
        value = self._data.get(key)
        return dict(value) if value is not None else None

    def insert(self, key: str, value: dict) -> Optional[dict]:
        """Store ``value`` under ``key`` (full overwrite); return the previous record."""
        previous = self._data.get(key)
        self._remember(key)
        self._data[key] = dict(value)
        return previous

    def insert_new(self, key: str, value: dict) -> None:
        if key in self._data:
            raise DuplicateKeyError(self.name, key)
        self._remember(key)
        self._data[key] = dict(value)

    def contains_key(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return sorted(self._data)

    def values(self) -> list[dict]:
        return [dict(self._data[k]) for k in self.keys()]

    def items(self) -> list[tuple[str, dict]]:
        return [(k, dict(self._data[k])) for k in self.keys()]

    def clear(self) -> None:
        for key in list(self._data):
            self._remember(key)
        self._data.clear()

    def snapshot(self) -> dict[str, dict]:
        return {k: dict(v) for k, v in self._data.items()}

    def restore(self, snapshot: dict[str, dict]) -> None:
        self._data = {k: dict(v) for k, v in snapshot.items()}

    # ---------- Undo journal ----------
    def begin(self) -> None:
        self._journals.append({})

    def commit(self) -> None:
        journal = self._journals.pop()
        if self._journals:
            # an enclosing transaction may still roll these keys back
            parent = self._journals[-1]
            for key, previous in journal.items():
                parent.setdefault(key, previous)

    def rollback(self) -> None:
        journal = self._journals.pop()
        for key, previous in journal.items():
            if previous is _MISSING:
                self._data.pop(key, None)
            else:
                self._data[key] = previous

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class Store:
    """
    Users, bicycles and renters tables, optionally snapshotted to a pickle file.

    ``path=None`` keeps everything in memory (tests); otherwise the file is
    loaded on start-up and rewritten on every committed transaction.
    """

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path) if path else None
        self.users = OrderedMap("users")
        self.bicycles = OrderedMap("bicycles")
        self.renters = OrderedMap("renters")
        self._rw = threading.RLock()
        self._depth = 0

        if self.path:
            log.info("Using data file %s", self.path)
            self._load()
        else:
            log.info("Using in-memory store")

    def _tables(self) -> dict[str, OrderedMap]:
        return {name: getattr(self, name) for name in TABLES}

    # ---------- Persistence ----------
    def _load(self):
        """Load data from the pickle file, or start empty if unavailable or invalid."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "rb") as f:
                data = pickle.load(f)
        except (OSError, pickle.UnpicklingError, EOFError) as e:
            log.warning("Load failed (%s); starting empty.", e)
            return

        if isinstance(data, dict) and all(isinstance(data.get(n, {}), dict) for n in TABLES):
            for name, table in self._tables().items():
                table.restore(data.get(name) or {})
            log.info("Loaded: users=%d, bicycles=%d, renters=%d",
                     len(self.users), len(self.bicycles), len(self.renters))
        else:
            # Incompatible format: back up the old file and start empty
            bak = self.path + ".bak"
            os.replace(self.path, bak)
            log.warning("Incompatible store (%s); backed up to %s. Starting empty.",
                        type(data).__name__, bak)

    def _dump(self):
        """Write the tables to the pickle file (atomic replace)."""
        if not self.path:
            return
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        tmp = self.path + ".tmp"
        payload = {name: table.snapshot() for name, table in self._tables().items()}
        with open(tmp, "wb") as f:
            pickle.dump(payload, f, protocol=pickle.HIGHEST_PROTOCOL)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, self.path)

    def save(self):
        """Thread-safe save method."""
        with self._rw:
            log.info("Saving to %s", self.path or "<memory>")
            self._dump()

    def clear(self):
        with self.transaction():
            for table in self._tables().values():
                table.clear()

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """
        Run the body under the store lock as one unit of work.

        If the body (or the dump that commits it) raises, every key the body
        wrote is put back as it was on entry and the exception propagates.
        """
        with self._rw:
            tables = list(self._tables().values())
            for table in tables:
                table.begin()
            self._depth += 1
            try:
                yield self
                # nested transactions commit with the outermost one
                if self._depth == 1:
                    self._dump()
            except BaseException:
                for table in tables:
                    table.rollback()
                log.warning("Transaction rolled back")
                raise
            else:
                for table in tables:
                    table.commit()
            finally:
                self._depth -= 1
