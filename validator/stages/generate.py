"""ReSpec document processing.

ReSpec generates the spec and checks it for errors.  The source document is
fetched from the local static server so its relative assets resolve; the
expanded HTML is written to a fresh temporary directory.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Mapping

import httpx

from validator.config import Settings
from validator.models import Stage, StageFailedError, ValidationRequest
from validator.stages.types import CommandRunner

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "output.html"


def build_source_url(src: str, params: Mapping[str, str], base_url: str) -> str:
    """Resolve *src* against the local server and append ReSpec overrides.

    Anything that is not an absolute URL is treated as a path relative to the
    served root.  Absolute ``http(s)`` URLs are used as given instead of being
    prefixed with the local server URL, so respec2html fetches them directly
    and the local server only serves relative assets of local documents.  Query
    parameters already present on *src* are kept; *params* override them by
    name.
    """
    url = httpx.URL(base_url).join(src)
    if params:
        url = url.copy_merge_params(dict(params))
    return str(url)


async def generate_document(
    request: ValidationRequest,
    settings: Settings,
    run: CommandRunner,
) -> Path:
    """Run respec2html against the request's document.

    Returns:
        Path to the generated HTML file.

    Raises:
        StageFailedError: If respec2html reports any error or warning.
    """
    print(f'🔎 Validating ReSpec document "{request.src}"...\n')
    out_dir = Path(tempfile.mkdtemp(prefix="respec-validator-"))
    out_file = out_dir / OUTPUT_FILENAME
    url = build_source_url(request.src, request.source_params, settings.base_url)

    # -e is stop on errors, -w is stop on warnings
    argv = [
        *settings.generator_argv(),
        "-e",
        "-w",
        "--timeout",
        str(settings.generator_timeout),
        "--src",
        url,
        "--out",
        str(out_file),
    ]
    result = await run(argv)
    if not result.ok:
        raise StageFailedError(Stage.GENERATING, result)

    logger.debug("Generated %s", out_file)
    print("    ✅  Success! ReSpec document has no warnings or errors...\n")
    return out_file
