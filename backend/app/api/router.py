"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import (
    auth, users, trips, destinations, activities, expenses
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(trips.router)
api_router.include_router(destinations.router)
api_router.include_router(activities.router)
api_router.include_router(expenses.router)
