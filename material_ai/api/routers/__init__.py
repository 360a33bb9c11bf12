"""Router module exports."""
from material_ai.api.routers import admin, ai, dashboard, lookups

__all__ = ["admin", "ai", "dashboard", "lookups"]
