"""Pandoc JSON filter entry point.

Pandoc runs a filter as ``<filter> <writer-name>`` with the JSON document on stdin and
expects the transformed document on stdout, e.g.::

    pandoc report.md --filter paraeq-filter -o report.docx

Pandoc always exchanges UTF-8, whatever the console encoding is, so the filter works on bytes.
"""

from __future__ import annotations

import json
from typing import IO

from .common import OutputFormat
from .document import number_equations
from .pandoc_helper import load_ast

PANDOC_ENCODING = "utf-8"


def run_filter(input_stream: IO[bytes], output_stream: IO[bytes], output_format: OutputFormat | str | None) -> None:
    data = input_stream.read()
    if isinstance(data, bytes):
        data = data.decode(PANDOC_ENCODING)

    doc = load_ast(data)
    number_equations(doc, output_format)

    out = json.dumps(doc, ensure_ascii=False)
    try:
        output_stream.write(out.encode(PANDOC_ENCODING))
    except TypeError:
        # text stream
        output_stream.write(out)
    output_stream.flush()
