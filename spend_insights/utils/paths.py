"""Utilities for resolving project-relative paths."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


SENTINELS = ("pyproject.toml", ".git", "config.yaml")


def find_project_root(start: Optional[Path] = None) -> Path:
    """Locate the project root by walking up from a start path.

    Recognition: presence of one of SENTINELS.
    Honors SPEND_INSIGHTS_ROOT if set.
    """
    env_root = os.getenv("SPEND_INSIGHTS_ROOT")
    if env_root:
        p = Path(env_root).expanduser().resolve()
        if p.exists():
            return p

    candidates = []
    if start is not None:
        candidates.append(Path(start).resolve())
    candidates.append(Path.cwd())
    candidates.append(Path(__file__).resolve())

    seen = set()
    for c in candidates:
        for p in [c] + list(c.parents):
            if p in seen:
                continue
            seen.add(p)
            for s in SENTINELS:
                if (p / s).exists():
                    return p
    return Path.cwd()


def resolve_config_path(path_str: str, env_var: str = "SPEND_INSIGHTS_CONFIG") -> Path:
    """Resolve a config file path.

    The environment variable wins over `path_str`. A relative path that does
    not exist under the working directory is looked up at the project root.
    """
    env_cfg = os.getenv(env_var)
    p = Path(env_cfg).expanduser() if env_cfg else Path(path_str).expanduser()
    if p.is_absolute() or p.exists():
        return p
    candidate = find_project_root() / p
    if candidate.exists():
        return candidate
    return p
