from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from .version import __version__
from .utils.logging import setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(add_completion=False, help="Merge hard-wrapped lines into paragraphs and optionally rewrap them.")


def _check_ratio(value: float) -> float:
    if not 0.0 < value <= 1.0:
        raise typer.BadParameter("must be greater than 0 and at most 1")
    return value


@app.command()
def main(
    source: Optional[Path] = typer.Argument(None, help="Input text file; stdin when omitted or '-'"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output file; stdout when omitted"),
    threshold: float = typer.Option(
        0.9,
        "-t",
        "--threshold",
        envvar="TEXTREFLOW_THRESHOLD",
        callback=_check_ratio,
        help="Short-line ratio against the average line length",
    ),
    width: Optional[int] = typer.Option(
        None,
        "-w",
        "--width",
        envvar="TEXTREFLOW_WIDTH",
        min=1,
        help="Rewrap paragraphs longer than this many characters; unbounded by default",
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Encoding for input and output files"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    setup_logger(log_level)
    cfg = RunConfig(
        source=source,
        output=output,
        threshold_ratio=threshold,
        width=width,
        encoding=encoding,
        log_level=log_level,
    )
    run(cfg)


def entrypoint():
    # .env has to be loaded before typer resolves the envvar options
    load_dotenv()
    app()


if __name__ == "__main__":
    entrypoint()
