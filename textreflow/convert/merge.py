from __future__ import annotations

from typing import Sequence

from .breaks import is_natural_paragraph_break


def merge_lines(lines: Sequence[str], baseline: float, threshold_ratio: float) -> str:
    """Join hard-wrapped lines, one logical paragraph per buffer line.

    Blank lines are not paragraph breaks; they are joined like any other
    line, so text on either side of them ends up in one paragraph.
    """
    buf = []
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if is_natural_paragraph_break(line, baseline, threshold_ratio):
            buf.append(line)
            buf.append("\n")
            continue
        buf.append(line)
        if index != last:
            buf.append(" ")
    return "".join(buf)
