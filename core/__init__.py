# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic forecast logic:
# - models/: Pydantic schemas for the forecast records
# - services/: Forecast generation
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
