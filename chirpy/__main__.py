"""
Run the Chirpy server

Usage:
    python -m chirpy
    python -m chirpy --port 9000 --log-level DEBUG
"""
import argparse
import logging

import uvicorn

from chirpy.config import Settings


def main():
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Run the Chirpy server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger("chirpy")
    logger.info(f"Starting Chirpy on {args.host}:{args.port}")

    uvicorn.run(
        "chirpy.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
        log_config=None,    # keep our basicConfig handlers instead of uvicorn's
    )


if __name__ == "__main__":
    main()
