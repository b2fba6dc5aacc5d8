"""Server Entry Point — run the API under uvicorn.

Invariants:
    - Exit code 0 after SIGINT/SIGTERM (uvicorn drains, then replays the signal into a no-op handler)
    - Exit code 1 whenever uvicorn aborts startup, e.g. the configured port cannot be bound
    - Previous SIGINT/SIGTERM handlers restored once the server returns

Design Decisions:
    - CLI flags override settings; settings override built-in defaults
"""

import argparse
import logging
import signal
import sys
from typing import Sequence

import uvicorn

from roster.config import get_settings
from roster.infrastructure.observability import setup_logging
from roster.main import create_app

logger = logging.getLogger("roster.server")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Roster user-management API")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Listening port (default: {settings.port})",
    )
    return parser.parse_args(argv)


_SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _ignore_replayed_signal(signum, frame) -> None:
    """uvicorn re-raises the shutdown signal after draining; swallow it."""


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings().model_copy(update={"host": args.host, "port": args.port})
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Starting %s on %s:%s", settings.service_name, args.host, args.port)
    previous = {sig: signal.signal(sig, _ignore_replayed_signal) for sig in _SHUTDOWN_SIGNALS}
    try:
        uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
    except SystemExit as exc:
        if not exc.code:
            return 0
        logger.error("Could not bind %s:%s", args.host, args.port)
        return 1
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    logger.info("%s stopped", settings.service_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
