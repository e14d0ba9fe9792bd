# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for CrateCodeGen.

The CLI turns an asset directory into a generated ``crate`` module. It is
typically invoked from a build step; by default it skips regeneration when
the existing module was produced by the same generator.
"""

import argparse
from pathlib import Path

from ._version import __version__
from .config import CrateConfig, default_config_path, load_config
from .errors import CrateError
from .generator import artifact_path, generate_from_config, is_artifact_valid
from .logging import configure_logging
from .reporting import Reporter


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="crate-codegen")
    p.add_argument(
        "--config",
        required=False,
        help="Path to a crate.yaml config (default: ./crate.yaml if present)",
    )
    p.add_argument("--assets", help="Asset directory to scan")
    p.add_argument(
        "--output",
        help="Output root; the module is written under <output>/<package path>/",
    )
    p.add_argument(
        "--package", help="Dotted package name of the generated module"
    )
    p.add_argument("--root-class", help="Name of the generated root class")
    p.add_argument("--module", help="File name (without .py) of the module")
    p.add_argument(
        "--force",
        action="store_true",
        help="Regenerate even when the existing module is up to date",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Only check whether the existing module is up to date (exit 1 if stale)",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and render without writing the output file",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v: verbose, -vv: debug)",
    )
    p.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease verbosity (can be used multiple times)",
    )
    p.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output mode",
    )
    p.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return p


def _resolve_config(p: argparse.ArgumentParser, args) -> CrateConfig:
    cfg_path = Path(args.config) if args.config else default_config_path()
    overrides = dict(
        assets=Path(args.assets) if args.assets else None,
        output=Path(args.output) if args.output else None,
        package=args.package,
        root_class=args.root_class,
        module=args.module,
    )
    if cfg_path is not None:
        return load_config(cfg_path).with_overrides(**overrides)
    missing = [
        f"--{k}" for k in ("assets", "output", "package") if not overrides[k]
    ]
    if missing:
        p.error(
            "Without a config file, these arguments are required: "
            + ", ".join(missing)
        )
    return CrateConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    """Parse CLI args and run the generator.

    Args:
        argv: Optional list of arguments (defaults to sys.argv[1:]).

    Returns:
        0 on success (or a valid module with ``--check``), 1 when ``--check``
        finds the module stale, 2 on errors.
    """
    p = _build_parser()
    args = p.parse_args(argv)
    if args.version:
        print(f"CrateCodeGen {__version__}")
        return 0
    if args.check and args.force:
        p.error("--check and --force are mutually exclusive")

    # Compute verbosity level: base 1, +1 per -v, -1 per -q, clamp [0..3]
    verbosity = max(0, min(3, 1 + int(args.verbose) - int(args.quiet)))
    rep = Reporter(verbosity=verbosity, color_mode=args.color)
    configure_logging(verbosity, use_color=rep.use_color)

    try:
        cfg = _resolve_config(p, args)
        out = artifact_path(cfg.output, cfg.package, cfg.module)
        if args.check:
            valid = is_artifact_valid(out, rep)
            if valid:
                rep.info("Up to date: %s", out)
                return 0
            rep.info("Stale or missing: %s", out)
            return 1
        if not (args.force or args.dry_run) and is_artifact_valid(out, rep):
            rep.info("Up to date, skipping: %s", out)
            return 0
        if generate_from_config(cfg, dry_run=args.dry_run, reporter=rep) is None:
            rep.warn("No asset directory at %s; nothing generated", cfg.assets)
    except CrateError as e:
        rep.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
