"""The pandoc JSON filter and the command line entry points."""

import io
import json

import pytest
from common import NBSP, cite, display_math_para, make_doc
from typer.testing import CliRunner

from paraeq.ast import nodes
from paraeq.cli_app import app, filter_app
from paraeq.exceptions import InvalidAstError
from paraeq.filter import run_filter
from paraeq.pandoc_helper import load_ast

runner = CliRunner()


def _doc_json():
    doc = make_doc(nodes.Para([cite("eq:a")]), display_math_para("a", "eq:a"))
    return json.dumps(doc)


def test_run_filter_streams():
    out = io.StringIO()
    run_filter(io.StringIO(_doc_json()), out, "docx")
    doc = json.loads(out.getvalue())

    assert doc["blocks"][0]["c"][0] == nodes.Str("1")
    assert doc["blocks"][1]["c"][1] == nodes.Str(NBSP * 4 + "(1)")
    assert doc["pandoc-api-version"] == [1, 23, 1]


def test_filter_app_takes_format_argument():
    result = runner.invoke(filter_app, ["latex"], input=_doc_json())
    assert result.exit_code == 0, result.output

    doc = json.loads(result.stdout)
    assert doc["blocks"][0]["c"][0] == nodes.RawInline("latex", "\\ref{eq:a}")
    assert doc["blocks"][1]["t"] == "RawBlock"


def test_filter_app_without_format_uses_fallback():
    result = runner.invoke(filter_app, [], input=_doc_json())
    assert result.exit_code == 0, result.output

    doc = json.loads(result.stdout)
    assert doc["blocks"][1]["c"][1] == nodes.Str(NBSP * 2 + "(1)")


def test_filter_subcommand():
    result = runner.invoke(app, ["filter", "html"], input=_doc_json())
    assert result.exit_code == 0, result.output

    doc = json.loads(result.stdout)
    assert doc["blocks"][1]["t"] == "Div"


def test_filter_rejects_invalid_input():
    result = runner.invoke(filter_app, ["html"], input="not json")
    assert result.exit_code == 1


@pytest.mark.parametrize("payload", ["not json", "[]", '{"meta": {}}', '{"blocks": {}}'])
def test_load_ast_rejects(payload):
    with pytest.raises(InvalidAstError):
        load_ast(payload)


def test_convert_reports_missing_latex(files_dir, tmp_path):
    source = files_dir / "doc_equations" / "equations.md"
    result = runner.invoke(
        app, ["convert", str(source), str(tmp_path / "out"), "--to", "pdf", "--pdf-engine", "no-such-latex-engine"]
    )
    assert result.exit_code == 1


def test_run_filter_on_utf8_bytes():
    doc = make_doc(display_math_para("ΔH = 0", "eq:Δ"))
    out = io.BytesIO()
    run_filter(io.BytesIO(json.dumps(doc, ensure_ascii=False).encode("utf-8")), out, "docx")
    result = json.loads(out.getvalue().decode("utf-8"))

    assert result["blocks"][0]["c"][0] == nodes.Math("ΔH = 0")


def test_filter_app_ignores_console_encoding():
    doc = make_doc(display_math_para("ΔH = 0", "eq:a"))
    cp1252_runner = CliRunner(charset="cp1252")
    result = cp1252_runner.invoke(filter_app, ["docx"], input=json.dumps(doc, ensure_ascii=False).encode("utf-8"))
    assert result.exit_code == 0, result.output

    out = json.loads(result.stdout_bytes.decode("utf-8"))
    assert out["blocks"][0]["c"][0] == nodes.Math("ΔH = 0"), "Expected the formula to survive as UTF-8"
