"""
renderer.py

Responsibility: Deterministically render the bundled templates onto disk.

Rules:
- Walk template files in sorted order to ensure deterministic output.
- If Jinja2 markers are present, render with the provided context; otherwise write
  the template text as-is.
- Destination files are always overwritten, never appended to.

This module intentionally does NOT know about prompts, Go tooling, or CLI parsing.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined

from gocli.errors import ScaffoldError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PROFILES_DIR = TEMPLATES_DIR / "profiles"
ENV_TEMPLATE = TEMPLATES_DIR / "env.j2"

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def _has_markers(text: str) -> bool:
    return ("{{" in text) or ("{%" in text) or ("{#" in text)


def available_profiles() -> list[str]:
    return sorted(p.name for p in PROFILES_DIR.iterdir() if p.is_dir())


def profile_dir(profile: str) -> Path:
    path = PROFILES_DIR / profile
    if not path.is_dir():
        known = ", ".join(available_profiles())
        raise ScaffoldError(f"Unknown profile: {profile} (available: {known})")
    return path


def iter_template_files(template_dir: Path) -> list[Path]:
    """
    Return all files under template_dir, in deterministic lexicographic order
    (relative path ordering).
    """
    files: list[Path] = []
    for root, _dirs, filenames in os.walk(template_dir):
        root_path = Path(root)
        for name in filenames:
            files.append(root_path / name)
    files.sort(key=lambda p: p.relative_to(template_dir).as_posix())
    return files


def render_text(text: str, context: dict[str, Any]) -> str:
    if not _has_markers(text):
        return text
    return _env.from_string(text).render(**context)


def render_file(src: Path, dst: Path, context: dict[str, Any]) -> Path:
    """
    Render a single template file to dst, creating parent directories as needed.
    """
    try:
        text = src.read_text(encoding="utf-8")
        out = render_text(text, context)
    except Exception as e:  # noqa: BLE001 - surface as ScaffoldError
        raise ScaffoldError(f"Failed rendering template file: {src.name}") from e

    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        # Normalize newlines for stable cross-platform output.
        dst.write_text(out, encoding="utf-8", newline="\n")
    except OSError as e:
        raise ScaffoldError(f"Error creating {dst.name} file: {e}") from e
    return dst
