"""Liveness endpoint."""

from fastapi import APIRouter, Response, status

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health() -> Response:
    """GET /api/health -- 200 with an empty body."""
    return Response(status_code=status.HTTP_200_OK)
