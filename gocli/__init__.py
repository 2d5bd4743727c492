"""
gocli package

This package implements go-cli, an interactive scaffolder for Go backend services.

Key responsibilities are split across modules:
- `prompts.py`: collect the project descriptor from the terminal (with defaults)
- `config.py`: optional YAML settings overriding the prompt defaults
- `renderer.py`: deterministic Jinja2 rendering of the bundled templates
- `runner.py`: isolated subprocess execution (`go mod init` / `go mod tidy`)
- `scaffolder.py`: ordered scaffolding steps (env -> module -> sources -> tidy)
- `cli.py`: CLI entrypoint and orchestration (settings -> prompts -> scaffold)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
