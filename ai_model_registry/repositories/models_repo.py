# COMPONENT: IN-MEMORY MODEL REPOSITORY
# REQUIREMENTS SATISFIED: record storage, sequential id assignment, atomic writes
"""
ai_model_registry/repositories/models_repo.py

Defines the in-memory repository holding every AI model record.

Records live in a dict keyed by integer id. Ids come from a counter that
starts at 1 and only ever moves forward: deleting a record (or resetting
the repository) never makes its id available again. All access goes
through a single re-entrant lock, and records handed out are deep copies,
so a caller never sees a half-applied write or mutates stored state.

Nothing is persisted; the repository lives as long as the process.
"""
from __future__ import annotations
import copy
from datetime import datetime, timezone
from threading import RLock
from typing import Any, Callable, Dict, List, Optional

from ai_model_registry.schemas.models import AIModel


class InMemoryRepo:
    def __init__(self):
        self._store: Dict[int, AIModel] = {}
        self._next_id: int = 1
        self._lock = RLock()

    def create(self, item: Dict[str, Any]) -> AIModel:
        with self._lock:
            item_id = self._next_id
            record = AIModel(
                **item,
                id=item_id,
                published_date=datetime.now(timezone.utc),
            )
            self._store[item_id] = record
            self._next_id += 1
            return record.model_copy(deep=True)

    def get(self, item_id: int) -> Optional[AIModel]:
        with self._lock:
            record = self._store.get(item_id)
            return record.model_copy(deep=True) if record is not None else None

    def update(self, item_id: int, fields: Dict[str, Any]) -> Optional[AIModel]:
        with self._lock:
            if item_id not in self._store:
                return None
            fields = {k: v for k, v in fields.items() if k not in ("id", "published_date")}
            record = self._store[item_id].model_copy(update=copy.deepcopy(fields))
            self._store[item_id] = record
            return record.model_copy(deep=True)

    def delete(self, item_id: int) -> bool:
        with self._lock:
            return self._store.pop(item_id, None) is not None

    def list(self, predicate: Optional[Callable[[AIModel], bool]] = None) -> List[AIModel]:
        # insertion order of the underlying dict
        with self._lock:
            return [
                x.model_copy(deep=True)
                for x in self._store.values()
                if predicate is None or predicate(x)
            ]

    def reset(self):
        # ids are never reused, so the counter survives a reset
        with self._lock:
            self._store.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id
