"""
Deprecation notices for legacy calling conventions.

Deprecated entry points keep working; they report through a process-wide
DeprecationHandler whose policy decides whether the notice becomes a Python
warning, a log line, nothing at all, or an error.
"""

from __future__ import annotations

import sys
import warnings
from enum import Enum
from typing import Any, Callable, Optional

from valuetypes.core.exceptions import ValueTypesDeprecationError
from valuetypes.core.logger import get_logger

logger = get_logger(__name__)

_PACKAGE = "valuetypes"


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside the valuetypes package, relative to handle()."""
    frame = sys._getframe(2)
    level = 2
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module != _PACKAGE and not module.startswith(_PACKAGE + "."):
            return level
        frame = frame.f_back
        level += 1
    return level


class DeprecationPolicy(Enum):
    """Policy for reporting use of deprecated behaviour."""

    WARN = "warn"              # DeprecationWarning + log warning (default)
    LOG = "log"                # Log warning only
    IGNORE = "ignore"          # Stay silent
    FAIL = "fail"              # Raise ValueTypesDeprecationError


def format_notice(behaviour: str, extra: str = "", removal: str = "") -> str:
    message = f"DEPRECATED: {behaviour}"
    if extra:
        message += f" {extra}"
    if removal:
        message += f" -- will be removed in version: {removal}"
    return message


class DeprecationHandler:
    """
    Reports deprecated calls according to the configured policy.

    Usage:
        >>> handler = DeprecationHandler(policy=DeprecationPolicy.LOG)
        >>> handler.handle("what_am_i()", "use classify() instead", "0.5")
        # Logs a warning and returns

        >>> handler = DeprecationHandler(policy=DeprecationPolicy.FAIL)
        >>> handler.handle("what_am_i()")
        # Raises ValueTypesDeprecationError
    """

    def __init__(
        self,
        policy: DeprecationPolicy = DeprecationPolicy.WARN,
        logger: Optional[Any] = None,
        custom_handler: Optional[Callable[[str, str, str], Any]] = None,
    ):
        """
        Initialize the handler.

        Args:
            policy: How to report deprecated calls (WARN, LOG, IGNORE, FAIL)
            logger: Logger instance used by WARN and LOG
            custom_handler: Callback receiving (behaviour, extra, removal);
                replaces the policy when given
        """
        self.policy = policy
        self.logger = logger
        self.custom_handler = custom_handler

    def handle(self, behaviour: str, extra: str = "", removal: str = "") -> None:
        """
        Report one use of deprecated behaviour.

        Raises:
            ValueTypesDeprecationError: If policy is FAIL
        """
        if self.custom_handler:
            self.custom_handler(behaviour, extra, removal)
            return

        if self.policy == DeprecationPolicy.IGNORE:
            return

        message = format_notice(behaviour, extra, removal)
        if self.policy == DeprecationPolicy.FAIL:
            raise ValueTypesDeprecationError(behaviour, message)

        (self.logger or logger).warning(message)
        if self.policy == DeprecationPolicy.WARN:
            warnings.warn(message, DeprecationWarning, stacklevel=_caller_stacklevel())


_HANDLER = DeprecationHandler()


def set_deprecation_handler(handler: Optional[DeprecationHandler]) -> None:
    """Install a process-wide handler; None restores the default WARN handler."""
    global _HANDLER
    _HANDLER = handler or DeprecationHandler()


def get_deprecation_handler() -> DeprecationHandler:
    return _HANDLER


def deprecated(behaviour: str, extra: str = "", removal: str = "") -> None:
    """Report deprecated behaviour through the process-wide handler."""
    _HANDLER.handle(behaviour, extra, removal)
