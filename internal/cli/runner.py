"""
Command-line runner for the Redis demo.

Acquires one connection, runs the selected steps in order, prints their
output to stdout and releases the connection. Command errors are printed
and the process still exits 0; a failure to connect at all is fatal.
"""

import argparse
import sys
from typing import List, Optional

from redis.exceptions import RedisError

from core.config import Settings, get_settings
from core.constants import DEFAULT_STEPS
from core.container import Container, bootstrap_container, get_store
from core.errors import ConfigurationError, ConnectionSetupError, RedisDemoError
from core.logger import configure_script_logging, format_exception_short, logger
from core.messages import LogMessages
from services.demo import KeyValueDemo, resolve_steps, step_names

EXIT_OK = 0
EXIT_FATAL = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="redis-demo",
        description="Run PING / SET / GET demo commands against Redis",
    )
    parser.add_argument(
        "--step",
        dest="steps",
        action="append",
        choices=step_names(),
        help="Step to run; repeat for several (default: set-struct)",
    )
    parser.add_argument("--host", help="Redis host (overrides REDIS_HOST)")
    parser.add_argument("--port", type=int, help="Redis port (overrides REDIS_PORT)")
    parser.add_argument("--db", type=int, help="Redis database (overrides REDIS_DB)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "redis_host": args.host,
        "redis_port": args.port,
        "redis_db": args.db,
        "log_level": args.log_level,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(get_settings(), args)

    configure_script_logging(
        level=settings.log_level,
        json_format=settings.log_format.lower() == "json",
    )

    steps = resolve_steps(args.steps or DEFAULT_STEPS)

    try:
        # Settings may differ between calls in one process
        Container.clear()
        bootstrap_container(settings)
        store = get_store()
    except (ConfigurationError, ConnectionSetupError) as e:
        logger.critical(format_exception_short(e, "Connection setup"))
        return EXIT_FATAL

    with store:
        demo = KeyValueDemo(store)
        try:
            for line in demo.stream(steps):
                print(line, flush=True)
        except (RedisDemoError, RedisError) as e:
            logger.debug(LogMessages.STEP_FAILED.format(error=e))
            print(e)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
