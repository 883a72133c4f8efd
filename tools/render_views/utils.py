from __future__ import annotations

import pathlib
import subprocess
from typing import Any, Dict

import yaml


def run_capture(cmd, cwd=None) -> subprocess.CompletedProcess:
    print("+", " ".join(cmd), "[cwd=" + str(cwd or pathlib.Path.cwd()) + "]")
    return subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        check=False,
    )


def read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def write_text(path: pathlib.Path, text: str) -> None:
    pathlib.Path(path).write_text(text, encoding="utf-8")
