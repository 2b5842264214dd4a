import logging
import sys


PACKAGE_LOGGER = "valuetypes"


class _PackageFilter(logging.Filter):
    """Logging filter that tags records emitted through the valuetypes handler."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.package = PACKAGE_LOGGER
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure the root logger and the valuetypes package logger.

    The root handler stays at INFO so other libraries do not flood the output;
    only the valuetypes namespace follows the requested level.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _PackageFilter) for f in h.filters):
            logging.getLogger(PACKAGE_LOGGER).setLevel(_resolve_level(level))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_PackageFilter())
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    logging.getLogger(PACKAGE_LOGGER).setLevel(_resolve_level(level))


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a module-specific logger under the valuetypes namespace.

    Library modules only fetch loggers; installing handlers is left to
    applications (or the CLI) via configure_root_logger.
    """
    return logging.getLogger(name)
