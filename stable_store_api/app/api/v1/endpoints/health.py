"""
Health endpoint.

Returns a static status together with the number of stored records per
resource kind, which doubles as a cheap check that the database is
reachable.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    services = request.app.state.services
    return {
        "status": "ok",
        "records": {name: service.store.count() for name, service in services.items()},
    }
