# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#
"""Generator hash stamp."""

from crate_codegen import hashing
from crate_codegen.hashing import (
    GENERATOR_HASH,
    compute_generator_hash,
    is_hash_valid,
    marker_line,
    read_marker,
)


def test_generator_hash_is_stable_and_version_bound():
    assert compute_generator_hash() == GENERATOR_HASH
    assert len(GENERATOR_HASH) == 64
    assert compute_generator_hash(version="0.0.0-other") != GENERATOR_HASH


def test_generator_hash_tracks_module_sources(tmp_path):
    for name in hashing.GENERATOR_MODULES:
        (tmp_path / name).write_text(f"# {name}\n")
    before = compute_generator_hash(package_dir=tmp_path)
    (tmp_path / "render.py").write_text("# changed\n")
    assert compute_generator_hash(package_dir=tmp_path) != before


def test_marker_round_trip(tmp_path):
    f = tmp_path / "crate.py"
    f.write_text(marker_line("ab" * 32) + "\nprint('hi')\n")
    assert read_marker(f) == "ab" * 32
    assert is_hash_valid(f, "ab" * 32)
    assert not is_hash_valid(f, GENERATOR_HASH)


def test_unstamped_or_missing_files_are_invalid(tmp_path):
    f = tmp_path / "crate.py"
    f.write_text("# hand written\n")
    assert read_marker(f) is None
    assert not is_hash_valid(f)
    assert not is_hash_valid(tmp_path / "missing.py")
    assert not is_hash_valid(tmp_path)
    assert read_marker(tmp_path / "missing.py") is None
