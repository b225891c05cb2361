"""Data models and error types shared across the validation pipeline."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple


class Stage(str, Enum):
    """States of the validation pipeline."""

    START = "start"
    GENERATING = "generating"
    MARKUP = "markup"
    LINKS = "links"
    SUCCESS = "success"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ValidatorError(Exception):
    """Base class for every error raised by respec-validator."""


class ConfigurationError(ValidatorError):
    """The validation request is incomplete or inconsistent."""


class ServerError(ValidatorError):
    """The local static file server could not be started."""


class StageFailedError(ValidatorError):
    """An external validator reported a failure for *stage*."""

    def __init__(
        self,
        stage: Stage,
        result: Optional["CommandResult"] = None,
        message: str | None = None,
    ) -> None:
        self.stage = stage
        self.result = result
        if message is None:
            if result is not None:
                message = (
                    f"Command failed with exit code {result.returncode}: "
                    f"{result.command_line}"
                )
            else:
                message = f"Stage {stage.value!r} failed"
        super().__init__(message)

    @property
    def diagnostics(self) -> str:
        """Captured output of the failing process, or the error message."""
        if self.result is not None and self.result.output.strip():
            return self.result.output
        return str(self)


# ---------------------------------------------------------------------------
# Request / results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationRequest:
    """Everything one invocation needs to know about what to validate."""

    src: str = "index.html"
    status: Optional[str] = None
    gh_token: Optional[str] = None
    gh_user: Optional[str] = None
    skip_markup: bool = False
    skip_links: bool = False
    use_get: bool = False
    manifest: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.src or not self.src.strip():
            raise ConfigurationError("A ReSpec src file is required.")
        if self.gh_user and not self.gh_token:
            raise ConfigurationError("Missing --gh-token value.")

    @property
    def source_params(self) -> Dict[str, str]:
        """ReSpec configuration overrides passed as query parameters."""
        params: Dict[str, str] = {}
        if self.gh_token:
            params["githubToken"] = self.gh_token
        if self.gh_user:
            params["githubUser"] = self.gh_user
        if self.status:
            params["specStatus"] = self.status
        return params


@dataclass
class CommandResult:
    """Exit status and captured output of one external process."""

    argv: Sequence[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        return "".join(part for part in (self.stdout, self.stderr) if part)

    @property
    def command_line(self) -> str:
        return shlex.join(str(arg) for arg in self.argv)


@dataclass
class Outcome:
    """Aggregated result of a validation run."""

    passed: bool
    stages_run: Tuple[Stage, ...] = field(default_factory=tuple)
    failed_stage: Optional[Stage] = None
    diagnostics: str = ""
    artifact: Optional[Path] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
