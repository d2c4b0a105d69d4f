"""
Project service for XRPL.Sale SDK
"""

from typing import Any, Dict, Optional

from ..core.http import HTTPClient
from ..models.base import PaginatedResponse
from ..models.projects import CreateProjectRequest, Project, ProjectStats, ProjectStatus


class ProjectsService:
    """Project management service"""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    async def list(
        self,
        status: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
    ) -> PaginatedResponse[Project]:
        """List projects; only the options given are sent"""
        params: Dict[str, str] = {}
        if status:
            params["status"] = status.value if isinstance(status, ProjectStatus) else status
        if page and page > 0:
            params["page"] = str(page)
        if limit and limit > 0:
            params["limit"] = str(limit)
        if sort_by:
            params["sort_by"] = sort_by
        if sort_order:
            params["sort_order"] = sort_order

        response = await self.http_client.get("/projects", params=params, deadline=deadline)
        return self.http_client.decode_as(PaginatedResponse[Project], response)

    async def get_active(
        self, page: int = 1, limit: int = 10, *, deadline: Optional[float] = None
    ) -> PaginatedResponse[Project]:
        """List active projects"""
        return await self.list(status=ProjectStatus.ACTIVE.value, page=page, limit=limit, deadline=deadline)

    async def get(self, project_id: str, *, deadline: Optional[float] = None) -> Project:
        """Get project details"""
        response = await self.http_client.get(f"/projects/{project_id}", deadline=deadline)
        return self.http_client.decode_as(Project, response)

    async def create(self, request: CreateProjectRequest, *, deadline: Optional[float] = None) -> Project:
        """Create a new project"""
        response = await self.http_client.post("/projects", json=request, deadline=deadline)
        return self.http_client.decode_as(Project, response)

    async def update(
        self, project_id: str, updates: Dict[str, Any], *, deadline: Optional[float] = None
    ) -> Project:
        """Partially update a project"""
        response = await self.http_client.patch(f"/projects/{project_id}", json=updates, deadline=deadline)
        return self.http_client.decode_as(Project, response)

    async def launch(self, project_id: str, *, deadline: Optional[float] = None) -> Project:
        """Launch a project's token sale"""
        response = await self.http_client.post(f"/projects/{project_id}/launch", deadline=deadline)
        return self.http_client.decode_as(Project, response)

    async def get_stats(self, project_id: str, *, deadline: Optional[float] = None) -> ProjectStats:
        """Get sale statistics for a project"""
        response = await self.http_client.get(f"/projects/{project_id}/stats", deadline=deadline)
        return self.http_client.decode_as(ProjectStats, response)
