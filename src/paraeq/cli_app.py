import sys
from typing import Optional

import typer

from .common import ExportFormats
from .config import logger
from .exceptions import ParaEqError

app = typer.Typer(help="Number labeled equations in pandoc documents and resolve references to them.")
filter_app = typer.Typer(add_completion=False)


def _run_filter(output_format: Optional[str]):
    from .filter import run_filter

    try:
        run_filter(sys.stdin.buffer, sys.stdout.buffer, output_format)
    except ParaEqError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)


@filter_app.command()
def pandoc_filter(output_format: Optional[str] = typer.Argument(None, help="Pandoc writer name")):
    _run_filter(output_format)


@app.command("filter")
def filter_cmd(output_format: Optional[str] = typer.Argument(None, help="Pandoc writer name")):
    """Run as a pandoc JSON filter: read the document from stdin and write it to stdout."""
    _run_filter(output_format)


@app.command("convert")
def convert(
    source: str,
    dest: str,
    to: ExportFormats = ExportFormats.DOCX,
    metadata_file: Optional[str] = None,
    pdf_engine: str = "xelatex",
    style_doc: Optional[str] = None,
):
    """Convert a markdown file with pandoc, numbering its equations on the way."""
    from .pandoc_helper import convert_markdown

    try:
        convert_markdown(
            source, dest, dest_format=to, metadata_file=metadata_file, pdf_engine=pdf_engine, style_doc=style_doc
        )
    except ParaEqError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
