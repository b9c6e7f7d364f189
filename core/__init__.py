# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for identities and settings
# - services/: Admin authorization and the settings store
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable with an in-memory database.
# =============================================================================
