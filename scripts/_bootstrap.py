"""Make the checkout's ``pwgen`` package importable from ``scripts/`` launchers."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

MARKERS = ("pyproject.toml", "pwgen/core/__init__.py")


def is_checkout_root(path: Path) -> bool:
    return all((path / marker).is_file() for marker in MARKERS)


def find_checkout_root(start: Path) -> Optional[Path]:
    for candidate in (start, *start.parents):
        if is_checkout_root(candidate):
            return candidate
    return None


def bootstrap_repo_path(script_file: str | Path = __file__) -> Path:
    root = find_checkout_root(Path(script_file).resolve().parent)
    if root is None:
        raise RuntimeError(f"no pwgen checkout (pyproject.toml + pwgen/core) above {script_file}")
    entry = str(root)
    if entry not in sys.path:
        sys.path.insert(0, entry)
    return root
