"""Shared pytest fixtures for the go-cli test suite.

Provides:
- A recording fake for the external command runner (no Go toolchain needed)
- A sample project descriptor
- Logger cleanup between CLI tests
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gocli.errors import ScaffoldError
from gocli.prompts import ProjectDescriptor


class FakeRunner:
    """Records every invocation (and whether `.env` existed at that moment); fails commands whose subcommand is in `fail_on`."""

    def __init__(self, fail_on: tuple[str, ...] = (), output: str = "") -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.env_present: list[bool] = []
        self.fail_on = fail_on
        self.output = output

    def __call__(self, cmd: list[str], *, cwd: Path) -> str:
        self.calls.append((list(cmd), Path(cwd)))
        self.env_present.append((Path(cwd) / ".env").exists())
        if len(cmd) > 2 and cmd[2] in self.fail_on:
            raise ScaffoldError(f"Command failed: {' '.join(cmd)}\n\nboom")
        if cmd[1:3] == ["mod", "init"]:
            (Path(cwd) / "go.mod").write_text(f"module {cmd[3]}\n\ngo 1.22\n", encoding="utf-8")
        return self.output

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _cwd in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners that fail on selected `go mod` subcommands."""
    return FakeRunner


@pytest.fixture
def descriptor() -> ProjectDescriptor:
    return ProjectDescriptor(
        project_name="app",
        port="8080",
        database_url="postgres://u:p@h/d",
        jwt_secret_key="mysecretkey",
        jwt_token_duration="24h",
    )


@pytest.fixture(autouse=True)
def _reset_gocli_logger():
    yield
    logger = logging.getLogger("gocli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
