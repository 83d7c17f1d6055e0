"""
Business logic shared by every resource kind.

``ResourceService`` sits between the HTTP endpoints and a
``ResourceStore``.  Request bodies arrive already parsed into the
kind's pydantic create/update models, so field-level validation has
happened by the time a method here runs.  The service is responsible
for what the models cannot check on their own:

* minting a fresh id and the ``created_at`` timestamp on creation;
* merging a partial update into the stored record (``merge_record``);
* enforcing per-kind uniqueness constraints;
* turning absent ids into ``RecordNotFoundError``.

Services are plain objects constructed with their store; ``main``
creates one per registered kind and keeps them on ``app.state``.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Optional

from pydantic import BaseModel

from ..core.clock import now
from ..core.errors import RecordNotFoundError, RecordValidationError
from ..resources import ResourceKind
from .resource_store import RecordT, ResourceStore


def new_record_id() -> str:
    return str(uuid.uuid4())


def merge_record(existing: RecordT, changes: BaseModel, updated_at: datetime) -> RecordT:
    """Apply a partial update to ``existing`` and return the new record.

    Fields explicitly supplied in ``changes`` override the stored ones
    and omitted fields keep their stored values.  An explicit null
    clears an optional field; for a required field it is ignored.
    ``id`` and ``created_at`` are always carried over from ``existing``.
    ``updated_at`` is set to ``updated_at`` but never earlier than
    ``created_at``.
    """
    fields = type(existing).model_fields
    supplied = {
        name: value
        for name, value in changes.model_dump(exclude_unset=True).items()
        if value is not None or not fields[name].is_required()
    }
    merged: Dict[str, Any] = existing.model_dump()
    merged.update(supplied)
    merged["id"] = existing.id
    merged["created_at"] = existing.created_at
    merged["updated_at"] = max(updated_at, existing.created_at)
    return type(existing).model_validate(merged)


class ResourceService(Generic[RecordT]):
    """CRUD operations for one resource kind."""

    def __init__(
        self,
        kind: ResourceKind,
        store: ResourceStore[RecordT],
        clock: Callable[[], datetime] = now,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self.kind = kind
        self.store = store
        self._clock = clock
        self._id_factory = id_factory

    def _mint_id(self) -> str:
        record_id = self._id_factory()
        # Never hand out an id that is currently live.
        while self.store.get(record_id) is not None:
            record_id = self._id_factory()
        return record_id

    def _check_unique(self, candidate: BaseModel, exclude_id: Optional[str] = None) -> None:
        """Reject ``candidate`` if another record shares a unique field value.

        This is a linear scan over the store, which is fine for the small
        collections these kinds hold.
        """
        if not self.kind.unique_fields:
            return
        for record in self.store.scan():
            if record.id == exclude_id:
                continue
            for field in self.kind.unique_fields:
                value = getattr(candidate, field)
                if getattr(record, field) == value:
                    shown = value.value if hasattr(value, "value") else value
                    raise RecordValidationError(
                        f"A {self.kind.label} with {field}={shown} already exists"
                    )

    async def create(self, data: BaseModel) -> RecordT:
        """Store a new record built from validated ``data`` and return it."""
        logger = logging.getLogger(__name__)
        self._check_unique(data)
        record = self.kind.record_model.model_validate(
            {
                **data.model_dump(),
                "id": self._mint_id(),
                "created_at": self._clock(),
                "updated_at": None,
            }
        )
        self.store.insert(record.id, record)
        logger.info("Created %s %s", self.kind.label, record.id)
        return record

    async def list_records(self) -> List[RecordT]:
        return self.store.scan()

    async def get_record(self, record_id: str) -> RecordT:
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFoundError(
                f"{self.kind.title} with id={record_id} not found", record_id
            )
        return record

    async def update_record(self, record_id: str, changes: BaseModel) -> RecordT:
        """Merge ``changes`` into the stored record.

        Raises ``RecordNotFoundError`` without touching the store if the
        id is unknown, and ``RecordValidationError`` if the merged record
        would break a uniqueness constraint.
        """
        logger = logging.getLogger(__name__)
        existing = self.store.get(record_id)
        if existing is None:
            raise RecordNotFoundError(
                f"Unable to update {self.kind.label} with id={record_id}. Record not found",
                record_id,
            )
        updated = merge_record(existing, changes, self._clock())
        self._check_unique(updated, exclude_id=record_id)
        self.store.insert(record_id, updated)
        logger.info("Updated %s %s", self.kind.label, record_id)
        return updated

    async def delete_record(self, record_id: str) -> RecordT:
        logger = logging.getLogger(__name__)
        removed = self.store.remove(record_id)
        if removed is None:
            raise RecordNotFoundError(
                f"Unable to delete {self.kind.label} with id={record_id}. Record not found",
                record_id,
            )
        logger.info("Deleted %s %s", self.kind.label, record_id)
        return removed
