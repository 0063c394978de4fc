"""
admin.py - admin endpoints for the fileserver hit counter

The counter itself is fed by the count_hits wrapper around /app, these
routes only read it and reset it
"""
from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse

from chirpy.api.dependencies import get_hit_counter
from chirpy.metrics import HitCounter

router = APIRouter(
    prefix="/admin",
    tags=["admin"]
)

METRICS_PAGE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@router.get("/metrics", response_class=HTMLResponse)
def metrics(counter: HitCounter = Depends(get_hit_counter)):
    """Admin page showing how many times the fileserver has been hit."""
    return HTMLResponse(METRICS_PAGE.format(hits=counter.read()))


@router.post("/reset")
def reset(counter: HitCounter = Depends(get_hit_counter)):
    counter.reset()
    return Response(status_code=200)
