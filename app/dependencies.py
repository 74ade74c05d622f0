# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings


def get_app_settings(request: Request) -> Settings:
    """
    Get the Settings the running application was built with.

    create_app() stores them on app.state, so apps built for different
    profiles (e.g. in tests) each see their own values.
    """
    return request.app.state.settings


# Type alias for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
