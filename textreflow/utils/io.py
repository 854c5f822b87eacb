from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class WriteResult:
    path: Path
    bytes_written: int


def is_stdio(path: Optional[Path]) -> bool:
    return path is None or str(path) == "-"


def read_text_file(path: Optional[Path], encoding: str = "utf-8") -> str:
    """Read ``path``, or stdin when it is ``None`` or ``-``."""
    if is_stdio(path):
        return sys.stdin.read()
    return path.read_bytes().decode(encoding)


def write_text_file(path: Path, content: str, encoding: str = "utf-8") -> WriteResult:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = content.encode(encoding)
    path.write_bytes(data)
    return WriteResult(path=path, bytes_written=len(data))
