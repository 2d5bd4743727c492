"""
prompts.py

Responsibility: Collect the project descriptor from the operator.

Each prompt falls back to its default on empty input. Terminal read errors count
as empty input; nothing here validates the format of an answer.
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass
from typing import TextIO

from gocli.config import Settings
from gocli.errors import ScaffoldError


@dataclass(frozen=True)
class ProjectDescriptor:
    """Values substituted into the `.env` file and the generated sources."""

    project_name: str
    port: str
    database_url: str
    jwt_secret_key: str
    jwt_token_duration: str

    def __post_init__(self) -> None:
        for key, value in asdict(self).items():
            if not str(value).strip():
                raise ScaffoldError(f"`{key}` must not be empty.")

    def env_context(self) -> dict[str, str]:
        return asdict(self)


def prompt_user(message: str, default: str, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(message)
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError):
        line = ""

    answer = line.strip()
    return answer or default


def collect_descriptor(settings: Settings, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> ProjectDescriptor:
    project_name = prompt_user("Enter the project module name: ", settings.project_name, stdin=stdin, stdout=stdout)
    port = prompt_user("Enter the HTTP port number: ", settings.port, stdin=stdin, stdout=stdout)
    database_url = prompt_user(
        "Enter the database connection string: ", settings.database_url, stdin=stdin, stdout=stdout
    )
    return ProjectDescriptor(
        project_name=project_name,
        port=port,
        database_url=database_url,
        jwt_secret_key=settings.jwt_secret_key,
        jwt_token_duration=settings.jwt_token_duration,
    )
