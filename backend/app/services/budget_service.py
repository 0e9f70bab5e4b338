"""
Budget aggregation: a read-only projection over expenses and activity costs.
"""
from decimal import Decimal
from typing import Dict
from sqlalchemy.orm import Session
from app.db.repositories import ActivityRepository, ExpenseRepository
from app.schemas.budget import BudgetBreakdown
from app.services.trip_service import get_owned_trip_or_404

ACTIVITIES_CATEGORY = "Activities"


def compute_budget(db: Session, trip_id: int, owner_id: int) -> BudgetBreakdown:
    """
    Compute the trip's budget usage from current rows.

    Expenses are grouped by category exactly as stored (case-sensitive).
    Activity costs are summed across every destination and, when positive,
    added under "Activities", merging with an expense category of that name.
    Nothing is cached; each call reads storage again.
    """
    trip = get_owned_trip_or_404(db, trip_id, owner_id)

    breakdown: Dict[str, Decimal] = {}
    for expense in ExpenseRepository(db).list_for_trip(trip.id):
        breakdown[expense.category] = breakdown.get(expense.category, Decimal(0)) + Decimal(expense.amount or 0)

    activities_cost = sum(
        (Decimal(activity.cost or 0) for activity in ActivityRepository(db).list_for_trip(trip.id)),
        Decimal(0)
    )
    if activities_cost > 0:
        breakdown[ACTIVITIES_CATEGORY] = breakdown.get(ACTIVITIES_CATEGORY, Decimal(0)) + activities_cost

    total_cost = sum(breakdown.values(), Decimal(0))
    budget_limit = Decimal(trip.budget_limit or 0)
    remaining = budget_limit - total_cost
    percentage_used = float(total_cost / budget_limit * 100) if budget_limit > 0 else 0.0

    return BudgetBreakdown(
        budget_limit=float(budget_limit),
        total_cost=float(total_cost),
        remaining=float(remaining),
        breakdown={category: float(amount) for category, amount in breakdown.items()},
        percentage_used=percentage_used
    )
