"""
Router package for the Coach Booking API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Client-side booking, listing and cancellation
- coach_workouts: Coach-side listing and cancellation
- coach_feedback: Coach feedback submission
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.coach_workouts import router as coach_workouts_router
from api.routers.coach_feedback import router as coach_feedback_router

__all__ = [
    "health_router",
    "workouts_router",
    "coach_workouts_router",
    "coach_feedback_router",
]
