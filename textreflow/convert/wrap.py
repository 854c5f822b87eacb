from __future__ import annotations

import textwrap
from typing import List, Optional, Tuple

from .width import split_lines, visual_width


def _split_at_columns(chunk: str, width: int) -> Tuple[str, str]:
    # at least one character goes to the head so the wrap always advances
    cols = 0
    for i, ch in enumerate(chunk):
        cols += visual_width(ch)
        if cols > width:
            cut = i or 1
            return chunk[:cut], chunk[cut:]
    return chunk, ""


class ColumnWrapper(textwrap.TextWrapper):
    """Greedy wrapper that measures chunks in display columns.

    A word wider than the line never shares a line with earlier words: it
    starts a fresh line and is cut into pieces of ``width`` columns.
    """

    def _handle_long_word(self, reversed_chunks, cur_line, cur_len, width):
        if cur_line:
            return
        head, tail = _split_at_columns(reversed_chunks[-1], width)
        cur_line.append(head)
        reversed_chunks[-1] = tail

    def _wrap_chunks(self, chunks):
        if self.width <= 0:
            raise ValueError(f"invalid width {self.width!r} (must be > 0)")
        lines = []
        chunks.reverse()
        while chunks:
            cur_line = []
            cur_len = 0
            if self.drop_whitespace and lines and chunks[-1].strip() == "":
                del chunks[-1]
            while chunks:
                chunk_width = visual_width(chunks[-1])
                if cur_len + chunk_width > self.width:
                    break
                cur_line.append(chunks.pop())
                cur_len += chunk_width
            if chunks and visual_width(chunks[-1]) > self.width:
                self._handle_long_word(chunks, cur_line, cur_len, self.width)
            if self.drop_whitespace and cur_line and cur_line[-1].strip() == "":
                del cur_line[-1]
            if cur_line:
                lines.append("".join(cur_line))
        return lines


def wrap_paragraph(paragraph: str, width: int) -> List[str]:
    wrapper = ColumnWrapper(
        width=width,
        expand_tabs=False,
        break_long_words=True,
        break_on_hyphens=False,
    )
    # whitespace-only paragraphs still occupy one line
    return wrapper.wrap(paragraph) or [""]


def rewrap_paragraphs(merged: str, para_chars_limit: Optional[int] = None) -> str:
    """Wrap every paragraph longer than ``para_chars_limit`` characters.

    Whether a paragraph is wrapped depends on its character count; the
    wrapped lines are then fitted to ``para_chars_limit`` display columns.
    ``None`` means unbounded and leaves the paragraphs untouched. The result
    carries no trailing newline.
    """
    out = []
    for paragraph in split_lines(merged):
        if para_chars_limit is None or len(paragraph) <= para_chars_limit:
            out.append(paragraph)
            continue
        out.extend(wrap_paragraph(paragraph, para_chars_limit))
    return "\n".join(out)
