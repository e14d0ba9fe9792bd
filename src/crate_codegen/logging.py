# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Logging utilities for CrateCodeGen.

Stdlib logging wrapper rendered through rich.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "crate_codegen"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name and name != _LOGGER_NAME:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(
    verbosity: int = 1, *, use_color: Optional[bool] = None
) -> None:
    """Route the package logger to stderr at a level matching ``verbosity``.

    Verbosity follows the reporter scale: 0 quiet, 1 normal, 2 verbose,
    3 debug.
    """
    logger = get_logger()
    if verbosity <= 0:
        level = logging.ERROR
    elif verbosity == 1:
        level = logging.WARNING
    elif verbosity == 2:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    if use_color is None:
        use_color = sys.stderr.isatty()

    console = Console(
        stderr=True, highlight=False, no_color=not use_color, soft_wrap=True
    )
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=verbosity >= 3,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
