"""Project models for PayzCore SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import PayzCoreModel


class Project(PayzCoreModel):
    """A newly created project, including its one-time secrets."""

    id: str
    name: str
    slug: str
    api_key: str
    webhook_secret: str
    webhook_url: Optional[str] = None
    created_at: datetime


class CreateProjectResponse(PayzCoreModel):
    """Response from project creation."""

    success: bool = True
    project: Project


class ProjectListItem(PayzCoreModel):
    """A project as returned by the list endpoint."""

    id: str
    name: str
    slug: str
    api_key: str
    webhook_url: Optional[str] = None
    is_active: bool = True
    created_at: datetime


class ListProjectsResponse(PayzCoreModel):
    """Response from listing projects."""

    success: bool = True
    projects: list[ProjectListItem] = Field(default_factory=list)
