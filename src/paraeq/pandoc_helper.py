from __future__ import annotations

import json
import os
import pathlib
import platform
import shutil
import sys
from typing import Any, Dict, List, Optional

from .common import ExportFormats
from .config import logger
from .document import number_equations
from .exceptions import InvalidAstError, LatexNotInstalled, PandocNotInstalled

PANDOC_RTS_ARGS = ["-M2GB", "+RTS", "-K64m", "-RTS"]
FILE_SUFFIXES = {ExportFormats.MARKDOWN: "md", ExportFormats.LATEX: "tex"}


def ensure_pandoc_path():
    """
    Set the pandoc path for pypandoc

    :return:
    """
    import pypandoc

    try:
        pypandoc._ensure_pandoc_path()
        return None
    except OSError:
        logger.debug("pypandoc could not find pandoc, attempting to locate it manually")

    pandoc_exe = shutil.which("pandoc")
    if pandoc_exe is not None:
        pandoc_path = pathlib.Path(pandoc_exe)
    elif platform.system() == "Windows":
        pandoc_path = pathlib.Path(sys.prefix) / "Library" / "bin" / "pandoc.exe"
    else:
        pandoc_path = pathlib.Path(sys.prefix) / "bin" / "pandoc"

    if not pandoc_path.exists():
        raise PandocNotInstalled("Pandoc executable not found. Please install Pandoc.")

    os.environ["PYPANDOC_PANDOC"] = str(pandoc_path)
    pypandoc._ensure_pandoc_path()
    return None


def load_ast(json_str: str) -> Dict[str, Any]:
    """Parse a pandoc JSON document, rejecting anything without a block list."""
    try:
        doc = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise InvalidAstError(f"Input is not valid JSON: {e}") from e

    if not isinstance(doc, dict) or not isinstance(doc.get("blocks"), list):
        raise InvalidAstError('Input is not a pandoc JSON document (expected an object with a "blocks" list)')
    return doc


def markdown_to_ast(md_str: str, extra_args: Optional[List[str]] = None) -> Dict[str, Any]:
    import pypandoc

    ensure_pandoc_path()
    ast_json = pypandoc.convert_text(
        md_str,
        to="json",
        format="markdown",
        extra_args=PANDOC_RTS_ARGS + list(extra_args or []),
    )
    return load_ast(ast_json)


def ast_to_text(doc: Dict[str, Any], to: str, outputfile=None, extra_args: Optional[List[str]] = None) -> str:
    """Serialize a pandoc JSON document with pandoc. Returns an empty string when writing to ``outputfile``."""
    import pypandoc

    ensure_pandoc_path()
    return pypandoc.convert_text(
        json.dumps(doc),
        to,
        format="json",
        outputfile=None if outputfile is None else str(outputfile),
        extra_args=PANDOC_RTS_ARGS + list(extra_args or []),
    )


def convert_markdown(
    source,
    dest,
    dest_format: ExportFormats | str = ExportFormats.DOCX,
    metadata_file=None,
    pdf_engine="xelatex",
    style_doc=None,
) -> pathlib.Path:
    """
    Convert a markdown file with equation numbering and references applied.

    :param source: Markdown source file
    :param dest: Destination file. The suffix is replaced to match ``dest_format``
    :param dest_format: Target format
    :param metadata_file: Optional pandoc metadata file
    :param pdf_engine: LaTeX engine used for pdf output
    :param style_doc: Optional reference docx used for styling
    :return: Path of the written file
    """
    if isinstance(dest_format, str):
        dest_format = ExportFormats(dest_format)

    source = pathlib.Path(source)
    suffix = FILE_SUFFIXES.get(dest_format, dest_format.value)
    dest = pathlib.Path(dest).with_suffix(f".{suffix}")

    extra_args = []
    if metadata_file is not None:
        extra_args += [f"--metadata-file={metadata_file}"]
    if dest_format == ExportFormats.PDF:
        if shutil.which(pdf_engine) is None:
            latex_url = "https://www.latex-project.org/get/"
            raise LatexNotInstalled(
                f'The pdf engine "{pdf_engine}" was not found on your system. '
                f'Please install latex before exporting to pdf. See "{latex_url}" for installation packages'
            )
        extra_args += [f"--pdf-engine={pdf_engine}"]
    if style_doc is not None and dest_format == ExportFormats.DOCX:
        extra_args += [f"--reference-doc={style_doc}"]
    extra_args += [f"--resource-path={source.parent}"]

    logger.info(f'Converting "{source}" to "{dest}"')
    with open(source, "r", encoding="utf-8") as f:
        md_str = f.read()

    doc = markdown_to_ast(md_str)
    number_equations(doc, dest_format.numbering_format)

    dest.parent.mkdir(parents=True, exist_ok=True)
    ast_to_text(doc, dest_format.value, outputfile=dest, extra_args=extra_args)
    logger.info(f'Successfully exported "{dest}"')
    return dest
