# COMPONENT: REGISTRY SERVICE
# REQUIREMENTS SATISFIED: model creation, lookup, partial update, deletion, listing and search
"""
ai_model_registry/services/registry.py

Defines the registry service responsible for managing AI model records.

The service sits between the API routers and the in-memory repository.
It validates new records, merges partial updates field by field, and
answers list and search queries with ``(id, record)`` pairs.

Key responsibilities:
    - Reject creates whose name or link is empty (name checked first)
    - Assign sequential ids that are never reused (via the repository)
    - Apply partial updates without touching ``id`` or ``published_date``
    - Provide listing, search by model type and exact search by tag
    - Provide count and reset operations for health checks and tests

Failures are raised as ``RegistryError`` subclasses; reads of a missing
id return ``None`` instead.
"""
from typing import Any, Dict, List, Optional

from ai_model_registry.repositories.models_repo import InMemoryRepo
from ai_model_registry.schemas.models import (
    AIModel,
    AIModelCreate,
    AIModelUpdate,
    ModelEntry,
    ModelType,
)
from ai_model_registry.services.errors import EmptyFieldError, ModelNotFoundError
from ai_model_registry.utils.logging import logger

# Display titles used in validation messages, in the order they are checked.
REQUIRED_FIELDS = (
    ("name", "Model Name"),
    ("link", "Model Link/URL"),
)

# A value replaces the current one; None means "no change".
PLAIN_FIELDS = (
    "name",
    "description",
    "model_type",
    "tags",
    "link",
    "submitter_name",
    "submitter_link",
    "complexity",
    "license_type",
)

# Any value the caller sent, null included, replaces the current one.
OPTIONAL_FIELDS = (
    "github_stars",
    "paper_link",
    "framework_used",
    "performance_metrics",
)


def _entries(records: List[AIModel]) -> List[ModelEntry]:
    return [ModelEntry(id=r.id, model=r) for r in records]


class RegistryService:
    def __init__(self, repo: Optional[InMemoryRepo] = None):
        self._repo = repo if repo is not None else InMemoryRepo()

    # -----------------------------
    # CRUD API
    # -----------------------------
    def create(self, m: AIModelCreate) -> int:
        for field, title in REQUIRED_FIELDS:
            if not getattr(m, field):
                logger.warning("create rejected: empty field=%s", field)
                raise EmptyFieldError(title)

        record = self._repo.create(m.model_dump())
        logger.info("create: id=%s name=%s type=%s", record.id, record.name, record.model_type.value)
        return record.id

    def get(self, model_id: int) -> Optional[AIModel]:
        return self._repo.get(model_id)

    def update(self, model_id: int, patch: AIModelUpdate) -> AIModel:
        """
        Merge ``patch`` into the stored record.

        Plain fields are only overwritten by a non-null value. Optional
        fields are overwritten whenever the caller set them, so an explicit
        ``None`` clears them. Name and link are not re-validated here.
        """
        sent = patch.model_fields_set
        fields: Dict[str, Any] = {}
        for name in PLAIN_FIELDS:
            value = getattr(patch, name)
            if value is not None:
                fields[name] = value
        for name in OPTIONAL_FIELDS:
            if name in sent:
                fields[name] = getattr(patch, name)

        updated = self._repo.update(model_id, fields)
        if updated is None:
            logger.warning("update rejected: id=%s not found", model_id)
            raise ModelNotFoundError(model_id)
        logger.info("update: id=%s fields=%s", model_id, sorted(fields))
        return updated

    def delete(self, model_id: int) -> None:
        if not self._repo.delete(model_id):
            logger.warning("delete rejected: id=%s not found", model_id)
            raise ModelNotFoundError(model_id)
        logger.info("delete: id=%s", model_id)

    # -----------------------------
    # Listing / search
    # -----------------------------
    def list_models(self) -> List[ModelEntry]:
        return _entries(self._repo.list())

    def search_by_type(self, model_type: ModelType) -> List[ModelEntry]:
        matches = self._repo.list(lambda r: r.model_type == model_type)
        logger.info("search_by_type: type=%s matches=%d", model_type.value, len(matches))
        return _entries(matches)

    def search_by_tag(self, tag: str) -> List[ModelEntry]:
        # exact, case-sensitive element match
        matches = self._repo.list(lambda r: any(t == tag for t in r.tags))
        logger.info("search_by_tag: tag=%s matches=%d", tag, len(matches))
        return _entries(matches)

    def count_models(self) -> int:
        return self._repo.count()

    def reset(self) -> None:
        self._repo.reset()
        logger.warning("reset: registry cleared (next id stays %s)", self._repo.next_id)
