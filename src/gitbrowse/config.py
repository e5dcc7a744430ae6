"""Process-wide settings, read once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PORT = 3000
DEFAULT_REPOS_DIR = "repos"


@dataclass(frozen=True)
class Settings:
    repos_root: Path
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    git_binary: str = "git"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``PORT`` and ``GITBROWSE_REPOS_ROOT``."""
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", "") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"Invalid PORT '{raw_port}'. Must be an integer")
        root = env.get("GITBROWSE_REPOS_ROOT", "") or DEFAULT_REPOS_DIR
        return cls(repos_root=Path(root).resolve(), port=port)
