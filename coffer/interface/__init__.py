"""Mini README: HTTP interface for Coffer.

Exports the FastAPI application factory serving the inventory and wallet
routes.
"""

from .web_app import create_application

__all__ = ["create_application"]
