from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .convert.reflow import ReflowOptions, reflow_text
from .utils.io import is_stdio, read_text_file, write_text_file
from .utils.logging import get_logger


@dataclass
class RunConfig:
    source: Optional[Path] = None  # None or "-" = stdin
    output: Optional[Path] = None  # None = stdout
    threshold_ratio: float = 0.9
    width: Optional[int] = None  # None = no rewrapping
    encoding: str = "utf-8"
    log_level: str = "INFO"

    def reflow_options(self) -> ReflowOptions:
        return ReflowOptions(threshold_ratio=self.threshold_ratio, para_chars_limit=self.width)


def _read_source(cfg: RunConfig, logger) -> str:
    label = "<stdin>" if is_stdio(cfg.source) else str(cfg.source)
    try:
        text = read_text_file(cfg.source, encoding=cfg.encoding)
    except FileNotFoundError:
        logger.error(f"No such file: {label}")
        raise SystemExit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Cannot decode {label} as {cfg.encoding}: {e}")
        raise SystemExit(1)
    logger.debug(f"Read {len(text)} characters from {label}")
    return text


def run(cfg: RunConfig) -> Optional[Path]:
    logger = get_logger()
    text = _read_source(cfg, logger)
    result = reflow_text(text, cfg.reflow_options())

    content = result + "\n" if result else ""
    if cfg.output is None:
        sys.stdout.write(content)
        return None
    written = write_text_file(cfg.output, content, encoding=cfg.encoding)
    logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    return written.path
