"""
API package for the Coach Booking API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: translation of application errors into HTTP responses
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
    get_feedback_repo,
    get_business_clock,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_feedback_repo",
    # Clock
    "get_business_clock",
]
