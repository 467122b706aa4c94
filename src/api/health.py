"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str | bool]:
    """Return application and transport status."""
    handler = request.app.state.game_api.request_handler
    return {
        "status": "ok",
        "transport": handler.name,
        "available": handler.is_available(),
    }
