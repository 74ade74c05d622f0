# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging setup, error handlers, server entry point
# - config.py: Environment variable loading and settings
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# forecast generation to the core/ package.
# =============================================================================

__version__ = "1.0.0"
