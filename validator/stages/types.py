"""Shared typing helpers for the stage modules."""

from __future__ import annotations

from pathlib import Path
from typing import Awaitable, Protocol, Sequence, Union

from validator.models import CommandResult


class CommandRunner(Protocol):
    """Anything shaped like :func:`validator.shell.run_command`."""

    def __call__(
        self, argv: Sequence[Union[str, Path]], *, quiet: bool = False
    ) -> Awaitable[CommandResult]: ...
