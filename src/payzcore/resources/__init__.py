"""
Resources for the PayzCore SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .payments import AsyncPaymentsResource, PaymentsResource
from .projects import AsyncProjectsResource, ProjectsResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Payments
    "PaymentsResource",
    "AsyncPaymentsResource",
    # Projects
    "ProjectsResource",
    "AsyncProjectsResource",
]
