"""Async HTTP client for the budget API.

Every response is an envelope; `ok: true` yields its `data`, anything else
raises `ApiError` carrying the failure code and transport status.
"""

from types import TracebackType
from typing import Any, Self
from uuid import UUID

import httpx

from src.budget.core.logging import get_logger
from src.budget.schemas import AuthResult, ExpenseRead, ProjectRead, UserRead

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """The server answered with `ok: false` (or no envelope at all)."""

    def __init__(self, code: str, status_code: int, error: str | None = None):
        super().__init__(f"{code} ({status_code})" + (f": {error}" if error else ""))
        self.code = code
        self.status_code = status_code
        self.error = error


class BudgetApiClient:
    """Thin wrapper over `httpx.AsyncClient` for the project/expense endpoints.

    Use as an async context manager so the connection pool is closed:

        async with BudgetApiClient(url) as api:
            await api.signin(email, password)
            projects = await api.list_projects()
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + API_PREFIX,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = await self._client.request(method, path, json=json, headers=headers)

        try:
            body = response.json()
        except ValueError:
            raise ApiError("SERVER_ERROR", response.status_code, response.text or None) from None

        if not isinstance(body, dict) or body.get("ok") is not True:
            body = body if isinstance(body, dict) else {}
            code = body.get("code") or ("UNAUTHORIZED" if response.status_code == 401 else "HTTP_ERROR")
            error = body.get("error") or body.get("detail")
            logger.debug(
                "API request failed",
                method=method,
                path=path,
                status=response.status_code,
                code=code,
            )
            raise ApiError(code, response.status_code, str(error) if error is not None else None)

        return body.get("data")

    # Users

    async def signup(self, email: str, password: str, name: str) -> AuthResult:
        data = await self._request(
            "POST", "/user/signup", {"email": email, "password": password, "name": name}
        )
        result = AuthResult.model_validate(data)
        self.token = result.token
        return result

    async def signin(self, email: str, password: str) -> AuthResult:
        data = await self._request("POST", "/user/signin", {"email": email, "password": password})
        result = AuthResult.model_validate(data)
        self.token = result.token
        return result

    async def me(self) -> UserRead:
        return UserRead.model_validate(await self._request("GET", "/user/me"))

    # Projects

    async def list_projects(self) -> list[ProjectRead]:
        data = await self._request("GET", "/project")
        return [ProjectRead.model_validate(item) for item in data]

    async def get_project(self, project_id: UUID | str) -> ProjectRead:
        return ProjectRead.model_validate(await self._request("GET", f"/project/{project_id}"))

    async def create_project(self, name: str, budget: float) -> ProjectRead:
        data = await self._request("POST", "/project", {"name": name, "budget": budget})
        return ProjectRead.model_validate(data)

    async def update_project(self, project_id: UUID | str, **changes: Any) -> ProjectRead:
        """Send only the given fields (`name`, `budget`)."""
        data = await self._request("PUT", f"/project/{project_id}", changes)
        return ProjectRead.model_validate(data)

    async def delete_project(self, project_id: UUID | str) -> None:
        await self._request("DELETE", f"/project/{project_id}")

    # Expenses

    async def list_expenses(self, project_id: UUID | str) -> list[ExpenseRead]:
        data = await self._request("GET", f"/expense/project/{project_id}")
        return [ExpenseRead.model_validate(item) for item in data]

    async def get_expense(self, expense_id: UUID | str) -> ExpenseRead:
        return ExpenseRead.model_validate(await self._request("GET", f"/expense/{expense_id}"))

    async def create_expense(
        self,
        project_id: UUID | str,
        amount: float,
        category: str | None = None,
        description: str | None = None,
    ) -> ExpenseRead:
        payload: dict[str, Any] = {"projectId": str(project_id), "amount": amount}
        if category is not None:
            payload["category"] = category
        if description is not None:
            payload["description"] = description
        return ExpenseRead.model_validate(await self._request("POST", "/expense", payload))

    async def update_expense(self, expense_id: UUID | str, **changes: Any) -> ExpenseRead:
        """Send only the given fields (`amount`, `category`, `description`)."""
        data = await self._request("PUT", f"/expense/{expense_id}", changes)
        return ExpenseRead.model_validate(data)

    async def delete_expense(self, expense_id: UUID | str) -> None:
        await self._request("DELETE", f"/expense/{expense_id}")
