"""
chirps.py - decoding and cleaning of incoming chirps

A chirp is a short text post. Before it's accepted it must be at most 140
characters, and a handful of banned words get masked out
"""
import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

MAX_CHIRP_LENGTH = 140
BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


class ChirpError(Exception):
    """Base class for chirp failures, carries the HTTP status to answer with."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ChirpDecodeError(ChirpError):
    """The request body wasn't a JSON chirp object."""
    status_code = 500


class ChirpTooLongError(ChirpError):
    status_code = 400

    def __init__(self, message: str = "chirp too long"):
        super().__init__(message)


class Chirp(BaseModel):
    """
    An incoming chirp, never stored

    body may be missing or null in the JSON, either way it reads as ""
    """
    body: Optional[str] = ""


def decode_chirp(raw: bytes) -> Chirp:
    """
    Parse a raw request body into a Chirp.

    Raises:
        ChirpDecodeError: body is not valid JSON or not a JSON object
    """
    try:
        return Chirp.model_validate_json(raw)
    except ValidationError as e:
        #pydantic collects every problem, the first one is enough for the client
        first = e.errors()[0]
        raise ChirpDecodeError(first["msg"]) from e


def clean_body(body: str) -> str:
    """
    Check a chirp's length and mask banned words.

    Tokens are split on single spaces (so repeated spaces survive the round trip)
    and compared case-insensitively to BANNED_WORDS. Only exact matches are masked,
    "Sharbert!" is left alone.

    Raises:
        ChirpTooLongError: body has more than MAX_CHIRP_LENGTH characters
    """
    if len(body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError()

    words = body.split(" ")
    cleaned_words = [MASK if word.lower() in BANNED_WORDS else word for word in words]
    return " ".join(cleaned_words)


def validate_chirp(raw: bytes) -> str:
    """Decode a request body and return its cleaned text."""
    chirp = decode_chirp(raw)
    try:
        return clean_body(chirp.body or "")
    except ChirpTooLongError:
        logger.debug(f"Rejected chirp of {len(chirp.body)} characters")
        raise
