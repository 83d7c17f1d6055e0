"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Generic pieces live in ``core`` (configuration, logging,
database, clock, errors) and ``services`` (the resource store and the
service wrapping it).  Each resource kind contributes its schemas in
``schemas`` and an entry in ``resources``; routers for all kinds are
built from one factory in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
