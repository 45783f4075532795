import json
import subprocess
import sys
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from letter import letter_cli
from letter.letter_ast import ExpressionStatement, NumericLiteral, Program

SOURCE = "let x = 42;"


def test_run_letter_string_input_prints_repr(capsys: pytest.CaptureFixture[str]) -> None:
    letter_cli.run_letter(source="42;", is_string=True)
    out = capsys.readouterr().out.strip()
    assert out == repr(Program((ExpressionStatement(NumericLiteral(42.0)),)))


def test_run_letter_json(capsys: pytest.CaptureFixture[str]) -> None:
    rendered = letter_cli.run_letter(source=SOURCE, is_string=True, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data == json.loads(rendered)
    decl = data["body"][0]["declarations"][0]
    assert decl["identifier"] == {"kind": "Identifier", "name": "x"}
    assert decl["init"] == {"kind": "NumericLiteral", "value": 42.0}


def test_run_letter_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    letter_cli.run_letter(source=SOURCE, is_string=True, tokens=True)
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "Token(LET, let)",
        "Token(IDENT, x)",
        "Token(ASSIGN, =)",
        "Token(NUMBER, 42)",
        "Token(SEMICOLON, ;)",
    ]


def test_run_letter_tokens_json(capsys: pytest.CaptureFixture[str]) -> None:
    letter_cli.run_letter(source="x;", is_string=True, tokens=True, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"type": "IDENT", "value": "x", "line": 1, "col": 1},
        {"type": "SEMICOLON", "value": ";", "line": 1, "col": 2},
    ]


def test_run_letter_file_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    file_path = tmp_path / "input.letter"
    file_path.write_text(SOURCE)
    letter_cli.run_letter(source=str(file_path))
    assert "VariableStatement" in capsys.readouterr().out


def test_run_letter_rejects_other_extensions() -> None:
    with pytest.raises(ValueError, match=r"\.letter"):
        letter_cli.run_letter(source="program.js")


def test_run_letter_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output_path = tmp_path / "out.json"
    letter_cli.run_letter(
        source=SOURCE, is_string=True, as_json=True, out=str(output_path)
    )
    assert capsys.readouterr().out == ""
    assert json.loads(output_path.read_text())["kind"] == "Program"


def test_main_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert letter_cli.main(["-s", "x = 1;", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["body"][0]["expression"]["kind"] == "AssignmentExpression"


def test_main_syntax_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert letter_cli.main(["-s", "42 = 42;"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == (
        "SyntaxError: Invalid left-hand side in assignment expression, "
        "expected Identifier or MemberExpression!"
    )


def test_main_lexer_error_in_token_mode(capsys: pytest.CaptureFixture[str]) -> None:
    assert letter_cli.main(["-s", "x @", "--tokens"]) == 1
    assert capsys.readouterr().err.strip() == "SyntaxError: Unexpected token: @"


def test_main_requires_source() -> None:
    with pytest.raises(SystemExit):
        letter_cli.main([])


def test_cli_subprocess(tmp_path: Path) -> None:
    file_path = tmp_path / "point.letter"
    file_path.write_text("class Point { constructor(x) { this.x = x; } }")
    result = subprocess.run(
        [sys.executable, "-m", "letter.letter_cli", str(file_path), "--json"],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parent.parent / "src",
    )
    assert result.returncode == 0
    assert json.loads(result.stdout)["body"][0]["kind"] == "ClassDeclaration"


@given(n=st.integers(min_value=0, max_value=10**6))  # type: ignore[misc]
def test_run_letter_numbers_round_trip_through_json(n: int) -> None:
    rendered = letter_cli.run_letter(source=f"{n};", is_string=True, as_json=True, out=None)
    expression = json.loads(rendered)["body"][0]["expression"]
    assert expression == {"kind": "NumericLiteral", "value": float(n)}
