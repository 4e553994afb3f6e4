from fastapi import APIRouter

from src.budget.api.v1 import expenses, projects, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(users.router)
api_router.include_router(projects.router)
api_router.include_router(expenses.router)
