"""Expense endpoints.

Access to an expense is granted through ownership of its project.
"""

from fastapi import APIRouter

from src.budget.api.dependencies import CurrentUser, ExpenseServiceDep, RequireUser
from src.budget.schemas import Ack, Envelope, ErrorEnvelope, ExpenseCreate, ExpenseRead, ExpenseUpdate

router = APIRouter(prefix="/expense", tags=["expenses"], dependencies=RequireUser)


@router.post(
    "",
    response_model=Envelope[ExpenseRead],
    summary="Create expense",
    responses={
        200: {
            "description": "Expense created",
            "content": {
                "application/json": {
                    "example": {
                        "ok": True,
                        "data": {
                            "id": "9b2f1d3e-8c4a-4f6b-a1d2-3e4f5a6b7c8d",
                            "projectId": "550e8400-e29b-41d4-a716-446655440000",
                            "amount": 120.5,
                            "category": "Uncategorized",
                            "description": "",
                            "date": "2024-01-15T10:30:00Z",
                            "createdAt": "2024-01-15T10:30:00Z",
                            "updatedAt": "2024-01-15T10:30:00Z",
                        },
                    }
                }
            },
        },
        400: {"model": ErrorEnvelope, "description": "projectId or amount missing"},
        404: {"model": ErrorEnvelope, "description": "Project not found"},
    },
)
async def create_expense(
    data: ExpenseCreate,
    current_user: CurrentUser,
    service: ExpenseServiceDep,
) -> Envelope[ExpenseRead]:
    """Record an expense against one of the caller's projects."""
    expense = await service.create(current_user.id, data)
    return Envelope(data=ExpenseRead.model_validate(expense))


# Declared before "/{expense_id}" so "project" is never captured as an id
@router.get(
    "/project/{project_id}",
    response_model=Envelope[list[ExpenseRead]],
    summary="List project expenses",
    description="List a project's expenses, most recent date first.",
    responses={404: {"model": ErrorEnvelope, "description": "Project not found"}},
)
async def list_project_expenses(
    project_id: str,
    current_user: CurrentUser,
    service: ExpenseServiceDep,
) -> Envelope[list[ExpenseRead]]:
    expenses = await service.list_by_project(project_id, current_user.id)
    return Envelope(data=[ExpenseRead.model_validate(e) for e in expenses])


@router.get(
    "/{expense_id}",
    response_model=Envelope[ExpenseRead],
    summary="Get expense",
    responses={404: {"model": ErrorEnvelope, "description": "Expense not found"}},
)
async def get_expense(
    expense_id: str,
    current_user: CurrentUser,
    service: ExpenseServiceDep,
) -> Envelope[ExpenseRead]:
    expense = await service.get(expense_id, current_user.id)
    return Envelope(data=ExpenseRead.model_validate(expense))


@router.put(
    "/{expense_id}",
    response_model=Envelope[ExpenseRead],
    summary="Update expense",
    description="Every field present in the body is applied, including 0 and empty strings.",
    responses={
        400: {"model": ErrorEnvelope, "description": "Malformed body"},
        404: {"model": ErrorEnvelope, "description": "Expense not found"},
    },
)
async def update_expense(
    expense_id: str,
    data: ExpenseUpdate,
    current_user: CurrentUser,
    service: ExpenseServiceDep,
) -> Envelope[ExpenseRead]:
    expense = await service.update(expense_id, current_user.id, data)
    return Envelope(data=ExpenseRead.model_validate(expense))


@router.delete(
    "/{expense_id}",
    response_model=Ack,
    summary="Delete expense",
    responses={404: {"model": ErrorEnvelope, "description": "Expense not found"}},
)
async def delete_expense(
    expense_id: str,
    current_user: CurrentUser,
    service: ExpenseServiceDep,
) -> Ack:
    await service.delete(expense_id, current_user.id)
    return Ack()
