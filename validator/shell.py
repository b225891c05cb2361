"""Run external commands and capture their output.

``run_command`` is the single seam through which every validation stage talks
to the outside world.  Output is echoed live to this process's stdout/stderr
(unless ``quiet``) while also being captured into a :class:`CommandResult`, so
the pipeline can report diagnostics after a failure.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

from validator.models import CommandResult

logger = logging.getLogger(__name__)

# Same status a POSIX shell reports for a missing executable.
COMMAND_NOT_FOUND = 127

# Read size for child output; lines of any length are passed through as-is.
_CHUNK_SIZE = 65536


async def _pump(
    stream: Optional[asyncio.StreamReader],
    sink: Optional[TextIO],
    chunks: List[str],
) -> None:
    if stream is None:
        return
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        data = await stream.read(_CHUNK_SIZE)
        text = decoder.decode(data, final=not data)
        if text:
            chunks.append(text)
            if sink is not None:
                sink.write(text)
                sink.flush()
        if not data:
            break


async def run_command(
    argv: Sequence[Union[str, Path]],
    *,
    quiet: bool = False,
    cwd: Optional[Path] = None,
) -> CommandResult:
    """Run *argv* to completion and return its exit status and output.

    The command is executed directly (no shell), so arguments never need
    quoting.  A missing executable is reported as a failed result with exit
    status 127 rather than raised.
    """
    args = [str(arg) for arg in argv]
    result = CommandResult(argv=args, returncode=0)
    logger.debug("Running shell command:\n\t%s\n", result.command_line)

    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
    except FileNotFoundError:
        result.returncode = COMMAND_NOT_FOUND
        result.stderr = f"{args[0]}: command not found\n"
        return result

    out_chunks: List[str] = []
    err_chunks: List[str] = []
    try:
        await asyncio.gather(
            _pump(process.stdout, None if quiet else sys.stdout, out_chunks),
            _pump(process.stderr, None if quiet else sys.stderr, err_chunks),
        )
        result.returncode = await process.wait()
    finally:
        if process.returncode is None:
            process.kill()
            await process.wait()
    result.stdout = "".join(out_chunks)
    result.stderr = "".join(err_chunks)
    logger.debug("Command exited with %d: %s", result.returncode, args[0])
    return result
