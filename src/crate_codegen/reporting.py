# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Colorized reporter with verbosity levels.

Levels (numeric, higher means more verbose):
  0 = quiet (errors only)
  1 = normal (info + warnings + errors)
  2 = verbose (adds progress details and timings)
  3 = debug (adds debug traces)

Color control:
  mode = "auto" (default): enable colors when stderr is a TTY
  mode = "always": force-enable colors
  mode = "never": disable colors
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.text import Text


def _supports_color(stream) -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass
class Reporter:
    verbosity: int = 1
    color_mode: str = "auto"  # auto|always|never

    def __post_init__(self):
        self._use_color = self._decide_color()
        # Resolve sys.stderr lazily so pytest's capsys sees our output.
        self._console = Console(
            stderr=True,
            highlight=False,
            soft_wrap=True,
            force_terminal=self._use_color or None,
            no_color=not self._use_color,
        )

    @property
    def use_color(self) -> bool:
        return self._use_color

    def _decide_color(self) -> bool:
        mode = (self.color_mode or "auto").lower()
        if mode == "never":
            return False
        if mode == "always":
            return True
        return _supports_color(sys.stderr)

    def _emit(self, label: str, style: str, msg: str, args: tuple) -> None:
        s = msg % args if args else msg
        line = Text()
        line.append(f"[{label}]", style=style if self._use_color else "")
        line.append(f" {s}")
        self._console.print(line)

    # Public API
    def error(self, msg: str, *args: Any) -> None:
        self._emit("ERROR", "bold red", msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 0:
            self._emit("WARN", "yellow", msg, args)

    def info(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 1:
            self._emit("INFO", "green", msg, args)

    def progress(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 2:
            self._emit("..", "blue", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        if self.verbosity >= 3:
            self._emit("DBG", "dim", msg, args)
