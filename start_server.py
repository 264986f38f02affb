#!/usr/bin/env python3
"""Launch the Testbed API.

Usage:
    ./start_server.py                   # Listen on 0.0.0.0:8080
    ./start_server.py --port 9000       # Use custom port
    ./start_server.py --log-level DEBUG # Log rejected requests too
"""

import argparse
import logging

import uvicorn

from testbed.logging_config import setup_logging
from testbed.services.config_service import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Launch the Testbed API")
    parser.add_argument("--port", type=int, default=settings.port,
                        help=f"Server port (default: {settings.port})")
    parser.add_argument("--host", default=settings.host,
                        help=f"Server host (default: {settings.host})")
    parser.add_argument("--log-level", default=settings.log_level,
                        help=f"Log level (default: {settings.log_level})")
    args = parser.parse_args()

    # testbed.server builds its app from this same settings instance.
    settings.log_level = args.log_level

    setup_logging(args.log_level)
    logging.getLogger(__name__).info("Server starting on %s:%d", args.host, args.port)

    uvicorn.run(
        "testbed.server:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
