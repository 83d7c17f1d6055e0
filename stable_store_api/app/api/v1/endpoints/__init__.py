"""
Endpoint subpackage for API v1.

``resources`` builds the CRUD router for a resource kind and ``health``
reports service status.  Routers are aggregated in ``router.py``.
"""
