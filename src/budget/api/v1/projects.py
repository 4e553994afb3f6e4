"""Project endpoints - owner-scoped CRUD.

Every route requires a bearer token; a project owned by another user is
reported as NOT_FOUND, never as forbidden.
"""

from fastapi import APIRouter

from src.budget.api.dependencies import CurrentUser, ProjectServiceDep, RequireUser
from src.budget.schemas import Ack, Envelope, ErrorEnvelope, ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/project", tags=["projects"], dependencies=RequireUser)

_PROJECT_EXAMPLE = {
    "ok": True,
    "data": {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "name": "Launch",
        "budget": 1000.0,
        "userId": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
        "createdAt": "2024-01-15T10:30:00Z",
        "updatedAt": "2024-01-15T10:30:00Z",
    },
}


@router.post(
    "",
    response_model=Envelope[ProjectRead],
    summary="Create project",
    responses={
        200: {
            "description": "Project created",
            "content": {"application/json": {"example": _PROJECT_EXAMPLE}},
        },
        400: {"model": ErrorEnvelope, "description": "Name or budget missing"},
    },
)
async def create_project(
    data: ProjectCreate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> Envelope[ProjectRead]:
    """Create a project owned by the caller."""
    project = await service.create(current_user.id, data)
    return Envelope(data=ProjectRead.model_validate(project))


@router.get(
    "",
    response_model=Envelope[list[ProjectRead]],
    summary="List projects",
    description="List the caller's projects, newest first.",
)
async def list_projects(
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> Envelope[list[ProjectRead]]:
    projects = await service.list_for_user(current_user.id)
    return Envelope(data=[ProjectRead.model_validate(p) for p in projects])


@router.get(
    "/{project_id}",
    response_model=Envelope[ProjectRead],
    summary="Get project",
    responses={404: {"model": ErrorEnvelope, "description": "Project not found"}},
)
async def get_project(
    project_id: str,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> Envelope[ProjectRead]:
    project = await service.get(project_id, current_user.id)
    return Envelope(data=ProjectRead.model_validate(project))


@router.put(
    "/{project_id}",
    response_model=Envelope[ProjectRead],
    summary="Update project",
    description="Update name and/or budget. An empty name is ignored; a budget of 0 is applied.",
    responses={
        400: {"model": ErrorEnvelope, "description": "Malformed body"},
        404: {"model": ErrorEnvelope, "description": "Project not found"},
    },
)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> Envelope[ProjectRead]:
    project = await service.update(project_id, current_user.id, data)
    return Envelope(data=ProjectRead.model_validate(project))


@router.delete(
    "/{project_id}",
    response_model=Ack,
    summary="Delete project",
    description="Delete a project and every expense recorded against it.",
    responses={404: {"model": ErrorEnvelope, "description": "Project not found"}},
)
async def delete_project(
    project_id: str,
    current_user: CurrentUser,
    service: ProjectServiceDep,
) -> Ack:
    await service.delete(project_id, current_user.id)
    return Ack()
