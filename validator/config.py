"""Centralised settings for respec-validator.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the current working
directory (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env", override=False)


def _env_flag(name: str, default: str = "") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.environ.get(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))

    # ------------------------------------------------------------------
    # Local static file server
    # ------------------------------------------------------------------
    server_host: str = field(
        default_factory=lambda: os.environ.get("RESPEC_VALIDATOR_HOST", "localhost")
    )
    server_port: int = field(
        default_factory=lambda: int(os.environ.get("RESPEC_VALIDATOR_PORT", "5000"))
    )
    server_root: Path = field(
        default_factory=lambda: Path(os.environ.get("RESPEC_VALIDATOR_ROOT", Path.cwd()))
    )
    server_start_timeout: float = field(
        default_factory=lambda: float(
            os.environ.get("RESPEC_VALIDATOR_SERVER_START_TIMEOUT", "10.0")
        )
    )

    @property
    def base_url(self) -> str:
        """Root URL the document processor reaches the served files under."""
        return f"http://{self.server_host}:{self.server_port}/"

    # ------------------------------------------------------------------
    # ReSpec document processor
    # ------------------------------------------------------------------
    generator_command: str = field(
        default_factory=lambda: os.environ.get("RESPEC2HTML_COMMAND", "npx respec2html")
    )
    generator_timeout: int = field(
        default_factory=lambda: int(os.environ.get("RESPEC2HTML_TIMEOUT", "30"))
    )

    # ------------------------------------------------------------------
    # Nu HTML checker
    # ------------------------------------------------------------------
    java_command: str = field(
        default_factory=lambda: os.environ.get("JAVA_COMMAND", "java")
    )
    vnu_jar: Path = field(
        default_factory=lambda: Path(
            os.environ.get("VNU_JAR", "node_modules/vnu-jar/build/dist/vnu.jar")
        )
    )
    markup_filter_pattern: str = field(
        default_factory=lambda: os.environ.get("VNU_FILTER_PATTERN", ".*bdi.*")
    )

    # ------------------------------------------------------------------
    # Link checker
    # ------------------------------------------------------------------
    link_checker_command: str = field(
        default_factory=lambda: os.environ.get("LINK_CHECKER_COMMAND", "npx link-checker")
    )
    link_check_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("LINK_CHECK_TIMEOUT_MS", "50000"))
    )
    link_check_redirects: int = field(
        default_factory=lambda: int(os.environ.get("LINK_CHECK_REDIRECTS", "3"))
    )
    link_check_ignore: tuple[str, ...] = field(
        default_factory=lambda: _env_list("LINK_CHECK_IGNORE", "https://ev.buaa.edu.cn/")
    )

    def generator_argv(self) -> list[str]:
        return shlex.split(self.generator_command)

    def java_argv(self) -> list[str]:
        return shlex.split(self.java_command)

    def link_checker_argv(self) -> list[str]:
        return shlex.split(self.link_checker_command)


# Module-level singleton — import this everywhere:
#   from validator.config import settings
settings = Settings()
