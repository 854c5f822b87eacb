from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..utils.logging import get_logger
from .merge import merge_lines
from .width import average_line_width, split_lines
from .wrap import rewrap_paragraphs


@dataclass(frozen=True)
class ReflowOptions:
    """Reflow settings.

    ``threshold_ratio`` is expected in (0, 1] and ``para_chars_limit`` to be
    a positive integer or ``None`` for unbounded. Neither is checked here.
    """

    threshold_ratio: float = 0.9
    para_chars_limit: Optional[int] = None


def reflow_text(text: str, options: Optional[ReflowOptions] = None) -> str:
    """Merge hard-wrapped lines into paragraphs, then rewrap long paragraphs.

    A line closes a paragraph when it is shorter than ``threshold_ratio``
    times the average line length and ends with sentence punctuation. All
    other lines are joined to the next one with a single space.
    """
    opts = options or ReflowOptions()
    logger = get_logger()

    lines = split_lines(text)
    baseline = average_line_width(lines)
    merged = merge_lines(lines, baseline, opts.threshold_ratio)
    logger.debug("Reflow lines=%d baseline=%.2f breaks=%d", len(lines), baseline, merged.count("\n"))
    return rewrap_paragraphs(merged, opts.para_chars_limit)
