# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Parses argv, initializes logging, builds AppState, runs exactly one command
and maps failures to stderr messages and exit status.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..errors import PredicateError, TodoError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    parser = registry.build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        settings = get_settings()

    level_name = str(args.log_level or getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    logger.debug("Starting %s command=%s", getattr(settings, "app_name", "todo"), args.command)

    try:
        state = create_initial_state(settings=settings, tasks_path=args.file)
        output = registry.handle(state, args)
    except PredicateError as e:
        print(f"Error filtering tasks: {e}", file=sys.stderr)
        return 1
    except TodoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        print(file=sys.stderr)
        return 130
    except Exception:
        logger.exception("Command %s crashed.", args.command)
        print("Internal error", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
