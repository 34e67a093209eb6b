from __future__ import annotations

import json

import pytest

import partialeval


def _write_ast(tmp_path, payload: dict) -> str:
    path = tmp_path / "expr.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_eval_json_partial(tmp_path, capsys):
    path = _write_ast(
        tmp_path,
        {
            "node_type": "binop",
            "op": "*",
            "cached": True,
            "left": {"node_type": "variable", "name": "x"},
            "right": {"node_type": "variable", "name": "y"},
        },
    )

    partialeval.main(["eval", "--file", path, "--bind", "x=2", "--json"])

    outcome = json.loads(capsys.readouterr().out)
    assert outcome["kind"] == "partial"
    assert outcome["formatted"] == "(2 * y)"
    assert outcome["unbound"] == ["y"]


def test_eval_json_full(tmp_path, capsys):
    path = _write_ast(tmp_path, {"node_type": "unary", "operand": {"node_type": "variable", "name": "x"}})

    partialeval.main(["eval", "-f", path, "-b", "x=2.5", "--json"])

    outcome = json.loads(capsys.readouterr().out)
    assert outcome["kind"] == "full"
    assert outcome["value"] == -2.5


def test_format_command(tmp_path, capsys):
    path = _write_ast(tmp_path, {"node_type": "variable", "name": "speed"})

    partialeval.main(["format", "--file", path])

    assert capsys.readouterr().out.strip() == "speed"


def test_eval_rejects_invalid_ast(tmp_path, capsys):
    path = _write_ast(tmp_path, {"node_type": "binop", "op": "%"})

    with pytest.raises(SystemExit) as exc_info:
        partialeval.main(["eval", "--file", path])

    assert exc_info.value.code == 1
    assert "niepoprawny JSON AST" in capsys.readouterr().err


def test_invalid_binding_is_rejected(tmp_path):
    path = _write_ast(tmp_path, {"node_type": "variable", "name": "x"})

    with pytest.raises(SystemExit):
        partialeval.main(["eval", "--file", path, "--bind", "x"])


def test_demo_runs(capsys):
    partialeval.main(["demo"])

    out = capsys.readouterr().out
    assert "((x + 1) * -y)" in out
    assert "-9" in out
    assert "((6 + a) + 2)" in out


def _reject_constant(token: str):
    raise ValueError(f"non-standard JSON token: {token}")


def test_eval_json_is_strict_json_for_infinite_constant(tmp_path, capsys):
    path = _write_ast(
        tmp_path,
        {
            "node_type": "binop",
            "op": "+",
            "left": {
                "node_type": "binop",
                "op": "/",
                "left": {"node_type": "number", "value": 1},
                "right": {"node_type": "number", "value": 0},
            },
            "right": {"node_type": "variable", "name": "y"},
        },
    )

    partialeval.main(["eval", "--file", path, "--json"])

    outcome = json.loads(capsys.readouterr().out, parse_constant=_reject_constant)
    assert outcome["kind"] == "partial"
    assert outcome["formatted"] == "(inf + y)"
    assert isinstance(outcome["expression"]["left"]["value"], str)
