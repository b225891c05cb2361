"""Validates HTML against the Nu HTML checker (vnu.jar), locally."""

from __future__ import annotations

from pathlib import Path

from validator.config import Settings
from validator.models import Stage, StageFailedError
from validator.stages.types import CommandRunner


def markup_argv(artifact: Path, settings: Settings) -> list[str]:
    argv = [*settings.java_argv(), "-jar", str(settings.vnu_jar), "--also-check-css"]
    if settings.markup_filter_pattern:
        argv += ["--filterpattern", settings.markup_filter_pattern]
    argv.append(str(artifact))
    return argv


async def check_markup(artifact: Path, settings: Settings, run: CommandRunner) -> None:
    """Raise :class:`StageFailedError` if vnu reports any markup or CSS error."""
    print("🔎 Checking document markup...\n")
    result = await run(markup_argv(artifact, settings))
    if not result.ok:
        raise StageFailedError(Stage.MARKUP, result)
    print("    ✅  Looks good! No HTML validation errors!\n")
