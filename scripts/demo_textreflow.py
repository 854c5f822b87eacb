from __future__ import annotations

import argparse
from pathlib import Path

from textreflow.pipeline import RunConfig, run
from textreflow.utils.logging import setup_logger


SAMPLE = (
    "Text copied out of a PDF viewer usually keeps the line breaks of the\n"
    "page it came from, so every sentence is chopped at the same column\n"
    "whether it ended there or not.\n"
    "Reflowing joins those lines back together and only keeps a break where\n"
    "a short line closes a sentence.\n"
)


def main():
    p = argparse.ArgumentParser(description="Demo runner for textreflow")
    p.add_argument("--file", action="append", type=Path, help="Text file to reflow (repeatable)")
    p.add_argument("--width", action="append", type=int, help="Rewrap width to try (repeatable)")
    p.add_argument("--outdir", default="demo_outputs", help="Output directory")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    files = args.file
    if not files:
        sample = outdir / "sample.txt"
        sample.write_text(SAMPLE, encoding="utf-8")
        files = [sample]
    widths = args.width or [None, 40, 72]

    for src in files:
        for width in widths:
            suffix = f"w{width}" if width else "merged"
            print(f"[demo] {src} ({suffix})")
            run(RunConfig(source=src, output=outdir / f"{src.stem}.{suffix}.txt", width=width))


if __name__ == "__main__":
    main()
