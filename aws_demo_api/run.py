"""Process entry point for the AWS Demo API.

Starts the FastAPI application under uvicorn.  Host, port and log level
default to the values from ``Settings`` (``SERVER_HOST``,
``SERVER_PORT``, ``LOG_LEVEL``) and can be overridden on the command
line.  The exit code is 0 after a graceful shutdown and 1 when the
server could not start, for example because the users store could not
be opened or the port is already taken.

Usage:
    aws-demo-api --port 8080
    python -m aws_demo_api.run
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from uvicorn import Config, Server

from aws_demo_api.app.core.config import settings
from aws_demo_api.app.core.logging_config import setup_logging

logger = logging.getLogger("aws_demo_api")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the AWS Demo API server.")
    parser.add_argument("--host", default=settings.server_host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.server_port, help="TCP port (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


async def serve(host: str, port: int, log_level: str) -> bool:
    """Run uvicorn until shutdown.  Returns whether the server ever started."""
    from aws_demo_api.app.main import create_app

    app = create_app(settings)
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        lifespan="on",
        log_level=log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()
    return server.started


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, settings.log_file or None)
    try:
        started = asyncio.run(serve(args.host, args.port, args.log_level))
    except KeyboardInterrupt:
        return 0
    except SystemExit as exc:
        # uvicorn exits with its own code when startup fails (lifespan
        # error or the socket cannot be bound); report both as 1.
        logger.critical("Server failed to start on %s:%s (exit %s)", args.host, args.port, exc.code)
        return 1
    except Exception:
        logger.exception("Server terminated unexpectedly")
        return 1
    if not started:
        logger.critical("Server did not start; see errors above")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
