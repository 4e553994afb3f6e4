"""Streamlit front end.

Run with: streamlit run src/budget/client/streamlit_app.py
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import streamlit as st

from src.budget.client.api import BudgetApiClient
from src.budget.client.budget import BudgetStatus, BudgetSummary
from src.budget.client.config import get_client_settings
from src.budget.client.views import (
    RECOVERABLE_ERRORS,
    DashboardView,
    NoticeLevel,
    ProjectDetailView,
    auth_failure_message,
)
from src.budget.core.logging import setup_logging

st.set_page_config(page_title="Budget Tracker", layout="wide", page_icon="💰")


def notify(level: NoticeLevel, message: str) -> None:
    if level is NoticeLevel.ERROR:
        st.toast(f"❌ {message}")
    else:
        st.toast(f"✅ {message}")


def confirm_armed(_question: str) -> bool:
    # The delete buttons only call through once the confirm checkbox is ticked
    return bool(st.session_state.get("confirm_delete"))


def run(action: Callable[[BudgetApiClient], Awaitable[Any]]) -> Any:
    """Run one async action against a fresh client bound to the current token."""
    settings = get_client_settings()

    async def runner() -> Any:
        async with BudgetApiClient(
            settings.api_url,
            token=st.session_state.get("token"),
            timeout=settings.request_timeout,
        ) as api:
            return await action(api)

    return asyncio.run(runner())


def render_summary(summary: BudgetSummary, budget: float) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Budget", f"${budget:,.2f}")
    col2.metric("Total Spent", f"${summary.total_expenses:,.2f}")
    col3.metric("Remaining", f"${summary.remaining_budget:,.2f}")

    st.progress(summary.bar_percentage / 100, text=f"{summary.percentage_used:.1f}% used")
    if summary.status is BudgetStatus.OVER:
        st.error(f"⚠️ Over budget by ${summary.over_budget_by:,.2f}")
    elif summary.status is BudgetStatus.WARNING:
        st.warning("Approaching budget limit")


def sign_in_page() -> None:
    st.title("💰 Budget Tracker")
    signin_tab, signup_tab = st.tabs(["Sign in", "Sign up"])

    with signin_tab, st.form("signin"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        if st.form_submit_button("Sign in"):
            try:
                result = run(lambda api: api.signin(email, password))
            except RECOVERABLE_ERRORS as e:
                st.error(auth_failure_message(e))
            else:
                st.session_state.token = result.token
                st.rerun()

    with signup_tab, st.form("signup"):
        name = st.text_input("Name")
        email = st.text_input("Email", key="signup_email")
        password = st.text_input("Password", type="password", key="signup_password")
        if st.form_submit_button("Create account"):
            try:
                result = run(lambda api: api.signup(email, password, name))
            except RECOVERABLE_ERRORS as e:
                st.error(auth_failure_message(e, signing_up=True))
            else:
                st.session_state.token = result.token
                st.rerun()


def dashboard_page() -> None:
    st.title("Projects")

    with st.expander("➕ New project"), st.form("new_project", clear_on_submit=True):
        name = st.text_input("Name")
        budget = st.text_input("Budget")
        submitted = st.form_submit_button("Create")

    async def load(api: BudgetApiClient) -> DashboardView:
        view = DashboardView(api, notify, confirm_armed)
        if submitted:
            await view.create_project(name, budget)
        await view.load()
        return view

    view = run(load)
    st.checkbox("Confirm deletes", key="confirm_delete")

    if not view.projects:
        st.info("No projects yet. Create one to start tracking spend.")

    for card in view.cards:
        project = card.project
        with st.container(border=True):
            st.subheader(project.name)
            st.caption(f"{card.expense_count} expense(s)")
            render_summary(card.summary, project.budget)

            open_col, delete_col = st.columns(2)
            if open_col.button("Open", key=f"open-{project.id}"):
                st.session_state.project_id = str(project.id)
                st.rerun()
            if delete_col.button("Delete", key=f"delete-{project.id}"):
                if run(lambda api, pid=project.id: DashboardView(api, notify, confirm_armed).delete_project(pid)):
                    st.rerun()


def detail_page(project_id: str) -> None:
    if st.button("← Back to Projects"):
        del st.session_state["project_id"]
        st.rerun()

    with st.expander("➕ Add expense"), st.form("new_expense", clear_on_submit=True):
        amount = st.text_input("Amount")
        category = st.text_input("Category", placeholder="Uncategorized")
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add")

    async def load(api: BudgetApiClient) -> ProjectDetailView:
        view = ProjectDetailView(api, project_id, notify, confirm_armed)
        if submitted:
            await view.create_expense(amount, category, description)
        await view.load()
        return view

    view = run(load)
    if view.redirect_to_dashboard:
        del st.session_state["project_id"]
        st.rerun()
    if view.project is None or view.summary is None:
        return

    st.title(view.project.name)
    render_summary(view.summary, view.project.budget)

    st.checkbox("Confirm deletes", key="confirm_delete")
    st.subheader("Expenses")
    if not view.expenses:
        st.info("No expenses yet.")
    for expense in view.expenses:
        cols = st.columns([2, 2, 4, 2, 1])
        cols[0].write(f"${expense.amount:,.2f}")
        cols[1].write(expense.category)
        cols[2].write(expense.description)
        cols[3].write(expense.date.strftime("%Y-%m-%d"))
        if cols[4].button("🗑️", key=f"delete-{expense.id}"):
            if run(
                lambda api, eid=expense.id: ProjectDetailView(
                    api, project_id, notify, confirm_armed
                ).delete_expense(eid)
            ):
                st.rerun()


def main() -> None:
    setup_logging(debug=True, service="client")

    if not st.session_state.get("token"):
        sign_in_page()
        return

    with st.sidebar:
        if st.button("Sign out"):
            st.session_state.clear()
            st.rerun()

    project_id = st.session_state.get("project_id")
    if project_id:
        detail_page(project_id)
    else:
        dashboard_page()


main()
