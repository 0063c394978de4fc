"""
chirps.py - routes for chirp validation

The body is read raw, not declared as a pydantic parameter: a chirp that
fails to decode comes back as a 500 with {"error": ...}, never a 422
"""
from fastapi import APIRouter, Request

from chirpy.api.responses import respond_with_json
from chirpy.api.schemas import CleanedChirp, ErrorResponse
from chirpy.chirps import validate_chirp

router = APIRouter(
    prefix="/api",
    tags=["chirps"]
)


@router.post(
    "/validate_chirp",
    response_model=CleanedChirp,
    responses={
        400: {"model": ErrorResponse, "description": "Chirp is longer than 140 characters"},
        500: {"model": ErrorResponse, "description": "Request body is not a JSON chirp"},
    },
)
async def validate(request: Request):
    """
    Validate a chirp and mask any banned words.

    Request body:
        {"body": "text of the chirp"}

    Returns:
        {"cleaned_body": "..."} with kerfuffle/sharbert/fornax replaced by ****
    """
    raw = await request.body()

    # ChirpError subclasses are turned into JSON errors by the app's exception handler
    cleaned = validate_chirp(raw)

    return respond_with_json(200, CleanedChirp(cleaned_body=cleaned))
