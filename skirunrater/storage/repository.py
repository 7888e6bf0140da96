from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from skirunrater import config
from skirunrater.models import SkiRun
from skirunrater.storage.xml_file import read_runs, write_runs

logger = logging.getLogger(__name__)


class StoreDisposedError(RuntimeError):
    """Raised when a repository is used after dispose()."""


def _stored_copy(run: SkiRun) -> SkiRun:
    # validated copy; later changes to the caller's object stay out of the store
    return SkiRun.model_validate(run.model_dump())


class SkiRunRepository:
    """In-memory ski run collection persisted to a single XML file.

    The whole file is read once on construction and rewritten after every
    mutation. Not safe for concurrent writers: two repositories over the same
    file simply overwrite each other.
    """

    def __init__(self, data_file: Optional[Path] = None) -> None:
        self.data_file = Path(data_file) if data_file is not None else config.data_file()
        self._runs: Optional[List[SkiRun]] = self.load(self.data_file)

    def __enter__(self) -> "SkiRunRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    @property
    def disposed(self) -> bool:
        return self._runs is None

    def _collection(self) -> List[SkiRun]:
        if self._runs is None:
            raise StoreDisposedError(f"repository for {self.data_file} has been disposed")
        return self._runs

    def load(self, path: Path) -> List[SkiRun]:
        """Read every run stored at ``path``. Does not touch this repository's state."""
        runs = read_runs(path)
        logger.debug("Loaded %d runs from %s", len(runs), path)
        return runs

    def persist(self) -> None:
        runs = self._collection()
        write_runs(self.data_file, runs)

    def insert(self, run: SkiRun) -> None:
        self._collection().append(_stored_copy(run))
        logger.info("Inserted run id=%s", run.id)
        self.persist()

    def _remove(self, run_id: int) -> int:
        runs = self._collection()
        kept = [r for r in runs if r.id != run_id]
        removed = len(runs) - len(kept)
        runs[:] = kept
        return removed

    def delete_by_id(self, run_id: int) -> None:
        removed = self._remove(run_id)
        logger.info("Deleted %d run(s) with id=%s", removed, run_id)
        self.persist()

    def update(self, run: SkiRun) -> None:
        # replaces every record sharing the id; the new one goes last
        stored = _stored_copy(run)
        removed = self._remove(run.id)
        self._collection().append(stored)
        logger.info("Updated run id=%s (replaced %d)", run.id, removed)
        self.persist()

    def get_by_id(self, run_id: int) -> Optional[SkiRun]:
        run = next((r for r in self._collection() if r.id == run_id), None)
        return run.model_copy() if run is not None else None

    def get_all(self) -> List[SkiRun]:
        return [r.model_copy() for r in self._collection()]

    def query_by_vertical(self, minimum: int, maximum: int) -> List[SkiRun]:
        return [r.model_copy() for r in self._collection() if minimum <= r.vertical <= maximum]

    def dispose(self) -> None:
        if self._runs is not None:
            logger.debug("Disposing repository for %s", self.data_file)
        self._runs = None
