from __future__ import annotations

from typing import FrozenSet

from .width import visual_width


SENTENCE_ENDINGS: FrozenSet[str] = frozenset(
    [
        # periods
        ".", "܂", "。",
        # colons
        "։", ":", "፡", "：",
        # exclamation marks
        "!", "！",
        # question marks
        "?", "？",
        # closing quotes
        "”", "᠉",
        # ellipses
        "᠃", "᠁", "…",
        # semicolons and other script terminators
        ";", "；", "؟", "।", "۔", "܀", "܁",
        "።", "፧", "፨", "᙮", "ክ", "ዼ",
    ]
)


def is_short_line(line: str, baseline: float, threshold_ratio: float) -> bool:
    # no usable baseline: the ratio is undefined, treat the line as long
    if baseline <= 0:
        return False
    return visual_width(line.strip()) / baseline < threshold_ratio


def ends_with_punctuation(line: str) -> bool:
    stripped = line.rstrip()
    return bool(stripped) and stripped[-1] in SENTENCE_ENDINGS


def is_natural_paragraph_break(line: str, baseline: float, threshold_ratio: float) -> bool:
    """True when ``line`` is short relative to ``baseline`` and ends a sentence.

    Shortness is judged on display columns, so a line of wide CJK characters
    counts twice its character length.
    """
    return is_short_line(line, baseline, threshold_ratio) and ends_with_punctuation(line)
