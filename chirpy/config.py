"""
config.py - runtime settings for the Chirpy server

Everything comes from environment variables, a .env file in the working
directory is loaded first so local development doesn't need exported vars
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_PORT = 8080


@dataclass
class Settings:
    """
    Settings the app needs at startup

    db_url is optional: without it the server still runs, it just has no database client
    """
    db_url: Optional[str] = None
    filepath_root: str = "."
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load .env (if present) and build settings from the environment."""
        load_dotenv()

        return cls(
            db_url=os.getenv("DB_URL") or None,     #empty string means "not configured"
            filepath_root=os.getenv("FILEPATH_ROOT", "."),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", DEFAULT_PORT)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
