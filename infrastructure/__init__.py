"""
Infrastructure Layer for the Coach Booking API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutRepository,
    SupabaseFeedbackRepository,
)

__all__ = [
    "SupabaseWorkoutRepository",
    "SupabaseFeedbackRepository",
]
