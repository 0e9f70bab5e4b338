"""
Pydantic schemas for the computed budget breakdown.
"""
from pydantic import BaseModel
from typing import Dict


class BudgetBreakdown(BaseModel):
    """Budget usage for a trip, recomputed from expenses and activity costs."""
    budget_limit: float
    total_cost: float
    remaining: float  # Negative when over budget
    breakdown: Dict[str, float] = {}  # category -> amount, activity costs under "Activities"
    percentage_used: float
