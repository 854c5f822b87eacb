from __future__ import annotations

from typing import List, Sequence

from wcwidth import wcwidth


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    A final newline does not open an extra empty line, so ``"a\\n"`` and
    ``"a"`` both give ``["a"]``.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def visual_width(line: str) -> int:
    # wcwidth returns -1 for control characters; they take no columns
    return sum(max(wcwidth(ch), 0) for ch in line)


def average_line_width(lines: Sequence[str]) -> float:
    """Mean UTF-8 byte length of the trimmed lines, 0.0 when there are none.

    Bytes, not display columns: a CJK character counts 3 here and 2 in
    :func:`visual_width`.
    """
    if not lines:
        return 0.0
    total = sum(len(line.strip().encode("utf-8")) for line in lines)
    return total / len(lines)
