"""Mini README: Interactive interfaces for the Food Corner ledger.

Exports the FastAPI application factory that serves the home, utilities and
income/expense screens together with their JSON API.
"""

from .web_app import create_application

__all__ = ["create_application"]
