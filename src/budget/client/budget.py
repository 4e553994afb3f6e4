"""Spend-versus-budget arithmetic for a project and its expenses."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

# Above this share of the budget the bar turns to a warning
WARNING_THRESHOLD = 80.0


class BudgetStatus(StrEnum):
    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class BudgetSummary:
    total_expenses: float
    remaining_budget: float
    percentage_used: float
    bar_percentage: float
    is_over_budget: bool
    over_budget_by: float
    status: BudgetStatus


def summarize(budget: float, amounts: Iterable[float]) -> BudgetSummary:
    """Compute totals and the progress bar for `budget` against `amounts`.

    `remaining_budget` goes negative once spending exceeds the budget.
    A zero budget reports 0% used. The bar is capped to 0..100 while
    `percentage_used` is not.
    """
    total = float(sum(amounts))
    percentage = total / budget * 100 if budget else 0.0
    is_over = total > budget

    if is_over:
        status = BudgetStatus.OVER
    elif percentage > WARNING_THRESHOLD:
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.OK

    return BudgetSummary(
        total_expenses=total,
        remaining_budget=budget - total,
        percentage_used=percentage,
        bar_percentage=max(0.0, min(percentage, 100.0)),
        is_over_budget=is_over,
        over_budget_by=total - budget if is_over else 0.0,
        status=status,
    )
