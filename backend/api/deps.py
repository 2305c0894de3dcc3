"""FastAPI dependencies for routes."""

from fastapi import Request

from wall_service import WallService


def get_wall_service(request: Request) -> WallService:
    """Return the WallService built by create_app. Use in Depends()."""
    return request.app.state.wall_service
