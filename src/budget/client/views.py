"""View controllers for the dashboard and project detail screens.

Controllers own the in-memory state a screen renders and the actions a user
can take on it. They never raise for API or transport failures: the user is
notified, the error is logged, and local state is left as it was.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

import httpx

from src.budget.client.api import ApiError, BudgetApiClient
from src.budget.client.budget import BudgetSummary, summarize
from src.budget.core.logging import get_logger
from src.budget.models import DEFAULT_CATEGORY
from src.budget.schemas import ExpenseRead, ProjectRead

logger = get_logger(__name__)

# Failures a view absorbs and reports instead of raising
RECOVERABLE_ERRORS = (ApiError, httpx.HTTPError)


class NoticeLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


Notify = Callable[[NoticeLevel, str], None]
Confirm = Callable[[str], bool]


def auth_failure_message(exc: Exception, *, signing_up: bool = False) -> str:
    """Message shown when sign-in or sign-up fails with a recoverable error."""
    if not isinstance(exc, ApiError):
        return "Could not reach the budget service"
    if signing_up:
        return f"Could not create account ({exc.code})"
    return "Invalid email or password"


def _parse_amount(value: str | float | None) -> float | None:
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value) if value else None
    except ValueError:
        return None


@dataclass(frozen=True)
class ProjectCard:
    project: ProjectRead
    expense_count: int
    summary: BudgetSummary


class DashboardView:
    """Project list with a budget card per project."""

    def __init__(self, api: BudgetApiClient, notify: Notify, confirm: Confirm):
        self.api = api
        self.notify = notify
        self.confirm = confirm
        self.projects: list[ProjectRead] = []
        self.expenses: dict[UUID, list[ExpenseRead]] = {}
        self.loading = False

    async def load(self) -> None:
        self.loading = True
        try:
            projects = await self.api.list_projects()
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to load projects", error=str(e))
            self.notify(NoticeLevel.ERROR, "Failed to fetch projects")
            return
        finally:
            self.loading = False

        self.projects = projects
        self.expenses = {}
        # Each card loads on its own; one failing card does not block the others
        for project in projects:
            await self._load_card(project.id)

    async def _load_card(self, project_id: UUID) -> None:
        try:
            self.expenses[project_id] = await self.api.list_expenses(project_id)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to load project expenses", project_id=str(project_id), error=str(e))

    @property
    def cards(self) -> list[ProjectCard]:
        cards = []
        for project in self.projects:
            expenses = self.expenses.get(project.id, [])
            cards.append(
                ProjectCard(
                    project=project,
                    expense_count=len(expenses),
                    summary=summarize(project.budget, (e.amount for e in expenses)),
                )
            )
        return cards

    async def create_project(self, name: str | None, budget: str | float | None) -> ProjectRead | None:
        """Create a project and put it first in the list.

        Both fields must be filled in; nothing is sent otherwise.
        """
        name = (name or "").strip()
        if not name or budget is None or budget == "":
            self.notify(NoticeLevel.ERROR, "Please fill in all fields")
            return None

        amount = _parse_amount(budget)
        if amount is None:
            self.notify(NoticeLevel.ERROR, "Budget must be a number")
            return None

        try:
            project = await self.api.create_project(name, amount)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to create project", error=str(e))
            self.notify(NoticeLevel.ERROR, "Failed to create project")
            return None

        self.projects = [project, *self.projects]
        self.expenses[project.id] = []
        self.notify(NoticeLevel.SUCCESS, "Project created!")
        return project

    async def delete_project(self, project_id: UUID) -> bool:
        if not self.confirm("Are you sure you want to delete this project?"):
            return False

        try:
            await self.api.delete_project(project_id)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to delete project", project_id=str(project_id), error=str(e))
            self.notify(NoticeLevel.ERROR, "Failed to delete project")
            return False

        self.projects = [p for p in self.projects if p.id != project_id]
        self.expenses.pop(project_id, None)
        self.notify(NoticeLevel.SUCCESS, "Project deleted")
        return True


class ProjectDetailView:
    """One project, its expenses and the spend summary."""

    def __init__(
        self,
        api: BudgetApiClient,
        project_id: UUID | str,
        notify: Notify,
        confirm: Confirm,
    ):
        self.api = api
        self.project_id = project_id
        self.notify = notify
        self.confirm = confirm
        self.project: ProjectRead | None = None
        self.expenses: list[ExpenseRead] = []
        self.loading = False
        # Set when the project is missing; the caller should go back to the dashboard
        self.redirect_to_dashboard = False

    async def load(self) -> None:
        self.loading = True
        try:
            try:
                project = await self.api.get_project(self.project_id)
            except ApiError as e:
                logger.info("Project not available", project_id=str(self.project_id), code=e.code)
                self.notify(NoticeLevel.ERROR, "Project not found")
                self.redirect_to_dashboard = True
                return

            expenses = await self.api.list_expenses(self.project_id)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to load project", project_id=str(self.project_id), error=str(e))
            self.notify(NoticeLevel.ERROR, "Error loading project")
            return
        finally:
            self.loading = False

        self.project = project
        self.expenses = expenses

    @property
    def summary(self) -> BudgetSummary | None:
        if self.project is None:
            return None
        return summarize(self.project.budget, (e.amount for e in self.expenses))

    async def create_expense(
        self,
        amount: str | float | None,
        category: str | None = None,
        description: str | None = None,
    ) -> ExpenseRead | None:
        """Record an expense and put it first in the list.

        An empty category is sent as the default one.
        """
        if amount is None or amount == "":
            self.notify(NoticeLevel.ERROR, "Please enter an amount")
            return None

        value = _parse_amount(amount)
        if value is None:
            self.notify(NoticeLevel.ERROR, "Amount must be a number")
            return None

        try:
            expense = await self.api.create_expense(
                self.project_id,
                value,
                category=(category or "").strip() or DEFAULT_CATEGORY,
                description=description or "",
            )
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to create expense", project_id=str(self.project_id), error=str(e))
            self.notify(NoticeLevel.ERROR, "Failed to create expense")
            return None

        self.expenses = [expense, *self.expenses]
        self.notify(NoticeLevel.SUCCESS, "Expense added!")
        return expense

    async def delete_expense(self, expense_id: UUID) -> bool:
        if not self.confirm("Are you sure you want to delete this expense?"):
            return False

        try:
            await self.api.delete_expense(expense_id)
        except RECOVERABLE_ERRORS as e:
            logger.warning("Failed to delete expense", expense_id=str(expense_id), error=str(e))
            self.notify(NoticeLevel.ERROR, "Failed to delete expense")
            return False

        self.expenses = [e for e in self.expenses if e.id != expense_id]
        self.notify(NoticeLevel.SUCCESS, "Expense deleted")
        return True
