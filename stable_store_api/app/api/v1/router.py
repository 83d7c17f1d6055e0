"""
Top-level router for version 1 of the API.

One CRUD router is built per registered resource kind and mounted under
the kind's path segment (``/staking``, ``/skill-records``,
``/donations``, ``/horoscopes``, ``/products``).  New kinds only need
an entry in ``resources.RESOURCE_KINDS``.
"""

from fastapi import APIRouter

from stable_store_api.app.resources import RESOURCE_KINDS

from .endpoints import health, resources

router = APIRouter()

for kind in RESOURCE_KINDS:
    router.include_router(resources.build_router(kind), prefix=f"/{kind.name}", tags=[kind.name])

router.include_router(health.router, tags=["health"])
