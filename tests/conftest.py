# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Shared fixtures."""

import importlib.util
import sys
from pathlib import Path

import pytest
from helpers import build_font, make_files


@pytest.fixture
def sample_assets(tmp_path):
    """``assets/fonts/Roboto-Bold.ttf`` + ``assets/images/logo.png``."""
    root = tmp_path / "assets"
    build_font(root / "fonts" / "Roboto-Bold.ttf", "Roboto", "Bold")
    make_files(root, "images/logo.png")
    return root


@pytest.fixture
def load_module(monkeypatch):
    """Import a generated module from a file path."""
    counter = {"n": 0}

    def _load(path: Path):
        counter["n"] += 1
        name = f"_generated_crate_{counter['n']}"
        spec = importlib.util.spec_from_file_location(name, str(path))
        assert spec is not None and spec.loader is not None
        mod = importlib.util.module_from_spec(spec)
        monkeypatch.setitem(sys.modules, name, mod)
        spec.loader.exec_module(mod)
        return mod

    return _load
