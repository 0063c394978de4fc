"""
schemas.py - Pydantic models for the JSON bodies the API sends back

The request side (Chirp) lives in chirpy.chirps since decoding is part of validation
"""
from pydantic import BaseModel


class CleanedChirp(BaseModel):
    """
    Response for POST /api/validate_chirp when the chirp is accepted
    """
    cleaned_body: str


class ErrorResponse(BaseModel):
    """
    Any JSON error, e.g. {"error": "chirp too long"}
    """
    error: str
