# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#
"""End-to-end generation, atomic writes, and staleness checks."""

import os

import pytest

from crate_codegen import generator
from crate_codegen.errors import ArtifactWriteError, InvalidInputError
from crate_codegen.generator import (
    artifact_path,
    atomic_write,
    generate,
    is_artifact_valid,
)
from crate_codegen.hashing import GENERATOR_HASH
from crate_codegen.reporting import Reporter


def test_artifact_path_follows_package(tmp_path):
    assert artifact_path(tmp_path, "com.example.app") == (
        tmp_path / "com" / "example" / "app" / "crate.py"
    )
    assert artifact_path(tmp_path, "app", "assets") == tmp_path / "app" / "assets.py"


def test_generate_then_validate(tmp_path, sample_assets, load_module):
    out_root = tmp_path / "gen"
    out = generate(out_root, sample_assets, "com.example.app")

    assert out == out_root / "com" / "example" / "app" / "crate.py"
    assert out.read_text(encoding="utf-8").startswith(f"# {GENERATOR_HASH} ")
    assert is_artifact_valid(out)
    assert not (out.parent / "crate.py.tmp").exists()

    mod = load_module(out)
    assert mod.Crate.images.LOGO.path == "images/logo.png"


def test_altered_marker_or_deleted_file_is_stale(tmp_path, sample_assets):
    out = generate(tmp_path / "gen", sample_assets, "app")
    text = out.read_text(encoding="utf-8")
    out.write_text(text.replace(GENERATOR_HASH, "0" * 64, 1), encoding="utf-8")
    assert not is_artifact_valid(out)

    out.unlink()
    assert not is_artifact_valid(out)


def test_missing_asset_dir_is_a_no_op(tmp_path):
    assert generate(tmp_path / "gen", tmp_path / "absent", "app") is None
    assert not (tmp_path / "gen").exists()

    f = tmp_path / "not_a_dir"
    f.write_text("x")
    assert generate(tmp_path / "gen", f, "app") is None


def test_dry_run_writes_nothing(tmp_path, sample_assets, capsys):
    out = generate(
        tmp_path / "gen",
        sample_assets,
        "app",
        dry_run=True,
        reporter=Reporter(color_mode="never"),
    )
    assert out is not None and not out.exists()
    assert "[DRY RUN]" in capsys.readouterr().err


def test_regeneration_is_byte_identical(tmp_path, sample_assets):
    out = generate(tmp_path / "gen", sample_assets, "app", root_class="Res")
    first = out.read_bytes()
    mtime = os.stat(out).st_mtime_ns

    assert generate(tmp_path / "gen", sample_assets, "app", root_class="Res") == out
    assert out.read_bytes() == first
    assert os.stat(out).st_mtime_ns == mtime


@pytest.mark.parametrize(
    "kwargs",
    [
        {"target_namespace": "com.1bad"},
        {"target_namespace": "com..x"},
        {"target_namespace": "class.app"},
        {"target_namespace": "app", "root_class": "not-valid"},
        {"target_namespace": "app", "root_class": "Asset"},
        {"target_namespace": "app", "root_class": "dataclass"},
        {"target_namespace": "app", "module_name": "crate.py"},
    ],
)
def test_invalid_names_are_rejected(tmp_path, sample_assets, kwargs):
    with pytest.raises(InvalidInputError):
        generate(tmp_path / "gen", sample_assets, **kwargs)


def test_atomic_write_reports_changes(tmp_path):
    target = tmp_path / "nested" / "file.py"
    assert atomic_write(target, "a\n") is True
    assert atomic_write(target, "a\n") is False
    assert atomic_write(target, "b\n") is True
    assert target.read_text() == "b\n"
    assert sorted(p.name for p in target.parent.iterdir()) == ["file.py"]


def test_write_failure_leaves_no_partial_file(tmp_path, sample_assets, monkeypatch):
    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(generator.os, "replace", boom)
    out_root = tmp_path / "gen"

    with pytest.raises(ArtifactWriteError) as ei:
        generate(out_root, sample_assets, "app")

    assert ei.value.code == "E_WRITE_IO"
    assert "disk full" in ei.value.message
    target = artifact_path(out_root, "app")
    assert not target.exists()
    assert not target.with_name("crate.py.tmp").exists()


def test_non_utf8_artifact_is_overwritten(tmp_path, sample_assets):
    out_root = tmp_path / "gen"
    target = artifact_path(out_root, "app")
    target.parent.mkdir(parents=True)
    target.write_bytes(b"# hand edited \xff\xfe\n")

    assert generate(out_root, sample_assets, "app") == target

    assert is_artifact_valid(target)
    assert target.read_bytes().startswith(b"# ")
    assert not target.with_name("crate.py.tmp").exists()


def test_atomic_write_cleans_temp_file_on_any_error(tmp_path, monkeypatch):
    def interrupted(src, dst):
        raise KeyboardInterrupt

    monkeypatch.setattr(generator.os, "replace", interrupted)
    target = tmp_path / "file.py"

    with pytest.raises(KeyboardInterrupt):
        atomic_write(target, "a\n")

    assert list(tmp_path.iterdir()) == []



def test_timings_reported_when_verbose(tmp_path, sample_assets, capsys):
    rep = Reporter(verbosity=2, color_mode="never")
    out = generate(tmp_path / "gen", sample_assets, "app", reporter=rep)
    is_artifact_valid(out, rep)
    err = capsys.readouterr().err
    assert "Time to build was" in err
    assert "Hash check took" in err
    assert "was valid: True" in err
    assert "Tree summary: namespaces=2 assets=2 fonts=1" in err
