"""Orchestration of the validation stages.

``ValidationPipeline.run`` walks the stages strictly in order:

    start → generating → [markup] → [links] → success

Optional stages are skipped when the request disables them.  The first stage
whose external tool fails moves the pipeline to ``failed`` and no further
stage runs.  Progress lines are printed to stdout as each stage starts and
succeeds; the caller receives an :class:`Outcome`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from validator import __version__
from validator.config import Settings, settings as default_settings
from validator.models import Outcome, Stage, StageFailedError, ValidationRequest
from validator.shell import run_command
from validator.stages.generate import generate_document
from validator.stages.links import check_links
from validator.stages.manifest import IgnoreList, load_manifest
from validator.stages.markup import check_markup
from validator.stages.types import CommandRunner

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "🎉 All checks passed!"
FAILURE_MESSAGE = "\n ❌  Not so good... please fix the issues above."

_ORDER = (Stage.START, Stage.GENERATING, Stage.MARKUP, Stage.LINKS, Stage.SUCCESS)


class ValidationPipeline:
    """Run the configured validation stages for one request."""

    def __init__(
        self,
        request: ValidationRequest,
        settings: Optional[Settings] = None,
        run: Optional[CommandRunner] = None,
    ) -> None:
        self.request = request
        self.settings = settings or default_settings
        self._run = run or run_command
        self.stage = Stage.START
        self.artifact: Optional[Path] = None

    def enabled(self, stage: Stage) -> bool:
        if stage is Stage.MARKUP:
            return not self.request.skip_markup
        if stage is Stage.LINKS:
            return not self.request.skip_links
        return True

    def next_stage(self, stage: Stage) -> Stage:
        """Return the stage entered after *stage* succeeds."""
        if stage in (Stage.SUCCESS, Stage.FAILED):
            raise ValueError(f"{stage.value!r} is a terminal stage")
        index = _ORDER.index(stage) + 1
        while not self.enabled(_ORDER[index]):
            index += 1
        return _ORDER[index]

    async def _enter(self, stage: Stage) -> None:
        if stage is Stage.GENERATING:
            self.artifact = await generate_document(self.request, self.settings, self._run)
        elif stage is Stage.MARKUP:
            await check_markup(self._require_artifact(), self.settings, self._run)
        elif stage is Stage.LINKS:
            await check_links(
                self._require_artifact(),
                self.settings,
                self._run,
                ignores=self._ignore_list(),
                use_get=self.request.use_get,
            )

    def _require_artifact(self) -> Path:
        if self.artifact is None:
            raise RuntimeError("No generated document available")
        return self.artifact

    def _ignore_list(self) -> IgnoreList:
        if self.request.manifest is None:
            return ()
        try:
            return load_manifest(self.request.manifest)
        except OSError as exc:
            raise StageFailedError(
                Stage.LINKS,
                message=f"Could not read manifest {self.request.manifest}: {exc}",
            ) from exc

    async def run(self) -> Outcome:
        """Run every enabled stage; stop at the first failure."""
        logger.debug("respec-validator version: %s", __version__)
        stages_run: List[Stage] = []
        self.stage = self.next_stage(Stage.START)
        try:
            while self.stage is not Stage.SUCCESS:
                stages_run.append(self.stage)
                await self._enter(self.stage)
                self.stage = self.next_stage(self.stage)
        except StageFailedError as exc:
            failed = self.stage
            self.stage = Stage.FAILED
            print(exc, file=sys.stderr)
            print(FAILURE_MESSAGE)
            return Outcome(
                passed=False,
                stages_run=tuple(stages_run),
                failed_stage=failed,
                diagnostics=exc.diagnostics,
                artifact=self.artifact,
            )

        print(SUCCESS_MESSAGE)
        return Outcome(
            passed=True,
            stages_run=tuple(stages_run),
            artifact=self.artifact,
        )
