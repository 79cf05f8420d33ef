"""Shared helpers for Bracketeer."""

# Bracketeer
# Copyright (C) 2025  Bracketeer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "bracketeer"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger for the package.

    The package logger only carries a NullHandler, so library calls stay
    silent until an application configures output with ``set_verbosity``.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level for this logger

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_verbosity(verbose: bool) -> None:
    """Send package logs to stderr at DEBUG or INFO level.

    Called by the command-line entry point. Repeated calls adjust the level
    and keep a single stream handler.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(type(h) is logging.StreamHandler for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = ["setup_logger", "set_verbosity", "LOG_FORMAT"]
