"""
cli.py

Responsibility: CLI entrypoint for go-cli.

High-level flow (single command `init`):
1) Load settings (optional `.gocli.yaml` or `--config`)
2) Prompt for the project descriptor
3) Scaffold: `.env` -> `go mod init` -> sources -> `go mod tidy`
4) Print the closing message, whatever the individual steps reported

This module should orchestrate behavior but keep concerns isolated:
- Settings: `config.py`
- Prompts: `prompts.py`
- Scaffolding: `scaffolder.py`
"""

from __future__ import annotations

import argparse
import logging
import sys

from gocli import __version__
from gocli.config import load_settings
from gocli.errors import ScaffoldError
from gocli.prompts import collect_descriptor
from gocli.renderer import available_profiles
from gocli.runner import run_command
from gocli.scaffolder import Scaffolder

logger = logging.getLogger(__name__)

DONE_MESSAGE = "Project initialized successfully! happy coding :)"

_LOG_FORMAT = "[%(levelname)s] %(message)s"


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("gocli")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)


def init_cmd(args: argparse.Namespace) -> int:
    _configure_logging(bool(args.verbose))
    settings = load_settings(args.config)

    # CLI overrides
    profile = args.profile or settings.profile

    scaffolder = Scaffolder(
        args.workdir,
        profile=profile,
        runner=run_command,
        go_binary=settings.go_binary,
    )
    descriptor = collect_descriptor(settings)
    report = scaffolder.run(descriptor)

    if not report.ok:
        logger.debug(
            "Finished with %d failed step(s) in %s", len(report.failures), scaffolder.workdir
        )
    print(DONE_MESSAGE)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="go-cli",
        description="go-cli is a tool for setting up initial files for a Go backend project",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command", required=True)

    i = sub.add_parser("init", help="Initialize a new Go project")
    i.add_argument("--workdir", default=".", help="Directory to scaffold into (default: current directory)")
    i.add_argument(
        "--profile",
        default=None,
        choices=available_profiles(),
        help="Template profile (overrides the settings file; default: full)",
    )
    i.add_argument("--config", default=None, help="Settings YAML file (default: ./.gocli.yaml when present)")
    i.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    i.set_defaults(func=init_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ScaffoldError as e:
        print(f"Oops. An error while executing go-cli '{e}'", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
