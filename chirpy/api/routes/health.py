"""
health.py - liveness endpoint
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(
    prefix="/api",
    tags=["health"]
)


@router.get("/healthz", response_class=PlainTextResponse)
def healthz():
    """
    Health Check Endpoint
    Deployment platforms use this to check if the service is alive
    """
    return PlainTextResponse("OK")
