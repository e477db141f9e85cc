import logging
import logging.config
import sys
from typing import Optional

from colorama import just_fix_windows_console
from pydantic import ValidationError

from brokenlinks.config import Settings, get_settings
from brokenlinks.errors import LinkCheckError
from brokenlinks.services.checker import run_link_check

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )


def run(settings: Optional[Settings] = None) -> int:
    """Run the link check and return the process exit code."""
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as exc:
            configure_logging()
            logger.error("Invalid configuration: %s", exc)
            print(f"Invalid link checker configuration:\n{exc}", file=sys.stderr)
            return 2

    configure_logging(settings.log_level)
    just_fix_windows_console()

    try:
        summary = run_link_check(settings)
    except LinkCheckError as exc:
        logger.error("Link check aborted: %s", exc)
        print(f"Link check aborted: {exc}", file=sys.stderr)
        return 1

    return 0 if summary.passed else 1


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
