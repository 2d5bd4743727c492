"""
scaffolder.py

Responsibility: Turn a `ProjectDescriptor` into a Go project skeleton on disk.

High-level flow (fixed order):
1) Write `.env`
2) `go mod init <project_name>`   (on failure, steps 3-4 are skipped)
3) Render the profile's source templates
4) `go mod tidy`

No step raises: failures are logged and collected in a `ScaffoldReport` so the
caller always gets to its final message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gocli.errors import ScaffoldError
from gocli.prompts import ProjectDescriptor
from gocli.renderer import ENV_TEMPLATE, iter_template_files, profile_dir, render_file
from gocli.runner import CommandRunner, run_command

logger = logging.getLogger(__name__)

ENV_FILE = ".env"
GO_MOD = "go.mod"


@dataclass
class ScaffoldReport:
    written: list[str] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def fail(self, step: str, error: ScaffoldError) -> None:
        logger.error("%s", error)
        self.failures.append((step, str(error)))


def _declared_module(go_mod: Path) -> str | None:
    for line in go_mod.read_text(encoding="utf-8").splitlines():
        parts = line.split("//", 1)[0].split(None, 1)
        if len(parts) == 2 and parts[0] == "module":
            return parts[1].strip().strip("\"`")
    return None


class Scaffolder:
    def __init__(
        self,
        workdir: str | Path,
        *,
        profile: str = "full",
        runner: CommandRunner = run_command,
        go_binary: str = "go",
    ) -> None:
        self._workdir = Path(workdir)
        self._template_dir = profile_dir(profile)
        self._runner = runner
        self._go = go_binary

    @property
    def workdir(self) -> Path:
        return self._workdir

    def write_env_file(self, descriptor: ProjectDescriptor) -> Path:
        dst = self._workdir / ENV_FILE
        return render_file(ENV_TEMPLATE, dst, descriptor.env_context())

    def init_module(self, module_name: str) -> bool:
        """
        Run `go mod init`. Returns False when an existing go.mod already declares
        module_name and the command was skipped.
        """
        go_mod = self._workdir / GO_MOD
        if go_mod.exists():
            try:
                declared = _declared_module(go_mod)
            except (OSError, UnicodeDecodeError) as e:
                raise ScaffoldError(f"Error reading {GO_MOD}: {e}") from e
            if declared != module_name:
                raise ScaffoldError(
                    f"Error initializing go module: {GO_MOD} already declares module {declared!r}"
                )
            logger.info("%s already declares module %s, skipping go mod init", GO_MOD, module_name)
            return False

        try:
            self._runner([self._go, "mod", "init", module_name], cwd=self._workdir)
        except ScaffoldError as e:
            raise ScaffoldError(f"Error initializing go module: {e}") from e
        return True

    def generate_sources(self, module_name: str, report: ScaffoldReport) -> None:
        context = {"module_name": module_name}
        for src in iter_template_files(self._template_dir):
            rel = src.relative_to(self._template_dir)
            try:
                render_file(src, self._workdir / rel, context)
            except ScaffoldError as e:
                report.fail("generate_sources", e)
                continue
            logger.debug("Wrote %s", rel.as_posix())
            report.written.append(rel.as_posix())

    def tidy_module(self) -> None:
        try:
            self._runner([self._go, "mod", "tidy"], cwd=self._workdir)
        except ScaffoldError as e:
            raise ScaffoldError(f"Error running go mod tidy: {e}") from e

    def run(self, descriptor: ProjectDescriptor) -> ScaffoldReport:
        report = ScaffoldReport()
        module_name = descriptor.project_name

        try:
            self._workdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            report.fail("workdir", ScaffoldError(f"Error creating directory {self._workdir}: {e}"))
            report.skipped.extend(["write_env_file", "init_module", "generate_sources", "tidy_module"])
            return report

        try:
            self.write_env_file(descriptor)
            report.written.append(ENV_FILE)
        except ScaffoldError as e:
            report.fail("write_env_file", e)

        try:
            self.init_module(module_name)
        except ScaffoldError as e:
            report.fail("init_module", e)
            report.skipped.extend(["generate_sources", "tidy_module"])
            return report

        self.generate_sources(module_name, report)

        try:
            self.tidy_module()
        except ScaffoldError as e:
            report.fail("tidy_module", e)

        return report
