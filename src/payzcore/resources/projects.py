"""Projects resource for PayzCore SDK. Requires a master key."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.project import CreateProjectResponse, ListProjectsResponse
from .base import AsyncBaseResource, SyncBaseResource


def _create_body(
    name: str,
    slug: str,
    webhook_url: Optional[str],
    metadata: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"name": name, "slug": slug}
    if webhook_url is not None:
        body["webhook_url"] = webhook_url
    if metadata is not None:
        body["metadata"] = metadata
    return body


class AsyncProjectsResource(AsyncBaseResource):
    """Async resource for project operations."""

    async def create(
        self,
        name: str,
        slug: str,
        webhook_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CreateProjectResponse:
        """
        Create a project.

        The returned project carries the API key and webhook secret; they are
        not shown again by ``list``.

        Args:
            name: Display name
            slug: URL-safe identifier
            webhook_url: Where payment events are delivered
            metadata: Arbitrary project data

        Returns:
            CreateProjectResponse with the new project
        """
        response = await self._post("/v1/projects", _create_body(name, slug, webhook_url, metadata))
        return CreateProjectResponse.model_validate(response)

    async def list(self) -> ListProjectsResponse:
        """List all projects."""
        response = await self._get("/v1/projects")
        return ListProjectsResponse.model_validate(response)


class ProjectsResource(SyncBaseResource):
    """Sync resource for project operations."""

    def create(
        self,
        name: str,
        slug: str,
        webhook_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CreateProjectResponse:
        """Create a project. See :meth:`AsyncProjectsResource.create`."""
        response = self._post("/v1/projects", _create_body(name, slug, webhook_url, metadata))
        return CreateProjectResponse.model_validate(response)

    def list(self) -> ListProjectsResponse:
        """List all projects."""
        response = self._get("/v1/projects")
        return ListProjectsResponse.model_validate(response)


__all__ = [
    "AsyncProjectsResource",
    "ProjectsResource",
]
