"""
Version 1 of the API.

Bundles the CRUD routers of every resource kind and the health check.
"""
