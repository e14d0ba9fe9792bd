# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#
"""Reporter verbosity gating and logging setup."""

import logging

from crate_codegen.logging import configure_logging, get_logger
from crate_codegen.reporting import Reporter


def test_verbosity_gates_levels(capsys):
    rep = Reporter(verbosity=1, color_mode="never")
    rep.error("bad %s", "thing")
    rep.warn("careful")
    rep.info("hello")
    rep.progress("step")
    rep.debug("detail")
    err = capsys.readouterr().err.splitlines()
    assert err == ["[ERROR] bad thing", "[WARN] careful", "[INFO] hello"]


def test_quiet_keeps_errors_and_debug_shows_all(capsys):
    Reporter(verbosity=0, color_mode="never").info("hidden")
    Reporter(verbosity=0, color_mode="never").error("shown")
    Reporter(verbosity=3, color_mode="never").debug("trace")
    assert capsys.readouterr().err.splitlines() == ["[ERROR] shown", "[DBG] trace"]


def test_color_modes(monkeypatch):
    assert Reporter(color_mode="always").use_color
    assert not Reporter(color_mode="never").use_color
    monkeypatch.setenv("NO_COLOR", "1")
    assert not Reporter(color_mode="auto").use_color


def test_configure_logging_levels():
    configure_logging(3, use_color=False)
    logger = get_logger()
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging(0, use_color=False)
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1
    assert get_logger("fonts").name == "crate_codegen.fonts"
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
