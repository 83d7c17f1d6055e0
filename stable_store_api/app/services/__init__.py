"""
Service layer.

``resource_store`` holds the generic persistent ordered map and
``resource_service`` the CRUD logic built on top of it.
"""
