"""Link and cross-reference checking of the generated document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from validator.config import Settings
from validator.models import Stage, StageFailedError
from validator.stages.types import CommandRunner


def links_argv(
    artifact: Path,
    settings: Settings,
    ignores: Iterable[str] = (),
    use_get: bool = False,
) -> list[str]:
    # the link checker expects a directory, not a file.
    argv = [*settings.link_checker_argv(), str(Path(artifact).parent)]
    argv += [f"--url-ignore={url}" for url in settings.link_check_ignore]
    argv.append(f"--http-timeout={settings.link_check_timeout_ms}")
    if use_get:
        argv.append("--http-always-get")
    argv.append(f"--http-redirects={settings.link_check_redirects}")
    argv += [f"--url-ignore={path}" for path in ignores]
    return argv


async def check_links(
    artifact: Path,
    settings: Settings,
    run: CommandRunner,
    ignores: Iterable[str] = (),
    use_get: bool = False,
) -> None:
    """Raise :class:`StageFailedError` if any link in the output is broken."""
    print("🔎 Checking links and cross-references...")
    result = await run(links_argv(artifact, settings, ignores, use_get))
    if not result.ok:
        raise StageFailedError(Stage.LINKS, result)
    print("\n    ✅  Links are good!\n")
