"""
CRUD endpoints shared by every resource kind.

``build_router`` returns an ``APIRouter`` exposing the five standard
routes for one ``ResourceKind``.  The router is mounted under the
kind's path segment in ``router.py``, giving for donations:

* ``POST /donations`` - create, 201 with the stored record;
* ``GET /donations`` - list every record in id order;
* ``GET /donations/{id}`` - read one record, 404 if absent;
* ``PUT /donations/{id}`` - partial update, 404 if absent;
* ``DELETE /donations/{id}`` - remove, returning the deleted record.

Request bodies are validated by the kind's pydantic models; validation
failures are reported as 400 by the handler installed in ``main``.
Unknown ids are reported as 404 for read, update and delete alike.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from stable_store_api.app.core.errors import RecordNotFoundError, RecordValidationError
from stable_store_api.app.resources import ResourceKind
from stable_store_api.app.services.resource_service import ResourceService


def build_router(kind: ResourceKind) -> APIRouter:
    """Create the CRUD router for ``kind``."""
    router = APIRouter()
    Record = kind.record_model
    Create = kind.create_model
    Update = kind.update_model

    def get_service(request: Request) -> ResourceService:
        return request.app.state.services[kind.name]

    @router.post(
        "",
        response_model=Record,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {kind.label}",
    )
    async def create_record(payload: Create, service: ResourceService = Depends(get_service)):
        try:
            return await service.create(payload)
        except RecordValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    @router.get("", response_model=List[Record], summary=f"List {kind.plural}")
    async def list_records(service: ResourceService = Depends(get_service)):
        return await service.list_records()

    @router.get("/{record_id}", response_model=Record, summary=f"Get {kind.label}")
    async def get_record(record_id: str, service: ResourceService = Depends(get_service)):
        try:
            return await service.get_record(record_id)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    @router.put("/{record_id}", response_model=Record, summary=f"Update {kind.label}")
    async def update_record(
        record_id: str,
        payload: Update,
        service: ResourceService = Depends(get_service),
    ):
        """Update a record; fields omitted from the body keep their values."""
        try:
            return await service.update_record(record_id, payload)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except RecordValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    @router.delete("/{record_id}", response_model=Record, summary=f"Delete {kind.label}")
    async def delete_record(record_id: str, service: ResourceService = Depends(get_service)):
        try:
            return await service.delete_record(record_id)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return router
