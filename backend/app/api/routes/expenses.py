"""
Expense routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.expense import ExpenseCreate, ExpenseResponse
from app.services import expense_service
from app.core.utils import format_response
from app.api.dependencies import get_current_user

router = APIRouter(prefix="/trips", tags=["expenses"])


@router.post("/{trip_id}/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    trip_id: int,
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an expense to a trip."""
    return expense_service.add_expense(db, trip_id, current_user.id, expense_data)


@router.delete("/expenses/{expense_id}")
async def delete_expense(
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    expense_service.delete_expense(db, expense_id, current_user.id)
    return format_response({"id": expense_id}, "Expense deleted successfully")
