#!/usr/bin/env python3
"""
partialeval.py — CLI narzędzie PartialEval.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.
Wyrażenia przyjmuje wyłącznie jako JSON AST (contracts.ExprAST), bez parsowania
zapisu infiksowego.

Podkomendy:
    demo    — przykład: (x + 1) * -y oraz częściowe (x * y) + a
    eval    — częściowa ewaluacja JSON AST z podanymi zmiennymi
    format  — strukturalny zapis JSON AST

Użycie:
    python partialeval.py demo
    python partialeval.py eval --file expr.json --bind x=2 --bind y=3
    echo '{"node_type": "variable", "name": "x"}' | python partialeval.py eval --json
    python partialeval.py format --file expr.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluation_context.dict_context import DictEvaluationContext
from adapters.expression.ast_codec import from_ast, to_outcome
from adapters.expression.nodes import Constant, Variable
from config import Settings
from contracts import EvalOutcome, ExprAST

logger = logging.getLogger("partial_eval")

_AST_ADAPTER: TypeAdapter[Any] = TypeAdapter(ExprAST)


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _fail(message: str) -> None:
    print(f"Błąd: {message}", file=sys.stderr)
    sys.exit(1)


def _read_json(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _parse_binding(raw: str) -> tuple[str, float]:
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"oczekiwano NAZWA=WARTOŚĆ, otrzymano {raw!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"niepoprawna liczba dla {name!r}: {value!r}")


def _load_ast(args: argparse.Namespace) -> ExprAST:
    text = _read_json(args).strip()
    if not text:
        _fail("podaj JSON AST przez --file lub stdin")
    try:
        return _AST_ADAPTER.validate_json(text)
    except ValidationError as exc:
        _fail(f"niepoprawny JSON AST:\n{exc}")


def _print_outcome_table(title: str, outcome: EvalOutcome) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    table.add_row("kind", outcome.kind)
    table.add_row("result", outcome.formatted)
    if outcome.kind == "partial":
        table.add_row("unbound", ", ".join(outcome.unbound) or "-")
    _console().print(table)


# -- podkomendy ------------------------------------------------------------

def _demo(args: argparse.Namespace, settings: Settings) -> None:
    context = DictEvaluationContext.empty().bind("x", 2).bind("y", 3)

    expression = Variable("x").add(Constant(1)).multiply(Variable("y").negate())
    _console().print(f"Wyrażenie: {expression.format()}")
    # Druga ewaluacja trafia w cache operatora mnożenia
    for attempt in (1, 2):
        result = expression.evaluate(context)
        _print_outcome_table(f"Ewaluacja #{attempt}", to_outcome(result))

    # c = (x * y) + a; a nie jest związane → wynik częściowy
    c = (
        Variable("x").multiply(Variable("y"))
        .add(Variable("a"))
        .evaluate(context)
        .as_expression()
    )
    a = c.add(Constant(2))
    _console().print(f"c = {c.format()}")
    _print_outcome_table("c + 2", to_outcome(a.evaluate(context)))
    _print_outcome_table("c + 2 (a=4)", to_outcome(a.evaluate(context.extended(a=4))))


def _eval(args: argparse.Namespace, settings: Settings) -> None:
    ast = _load_ast(args)
    try:
        expression = from_ast(ast, max_depth=settings.max_expression_depth)
    except ValueError as exc:
        _fail(str(exc))

    context = DictEvaluationContext.from_mapping(dict(args.bind))
    outcome = to_outcome(expression.evaluate(context))

    if args.json:
        print(outcome.model_dump_json(indent=2))
        return
    _console().print(f"Wyrażenie: {expression.format()}")
    _print_outcome_table("Wynik", outcome)


def _format(args: argparse.Namespace, settings: Settings) -> None:
    ast = _load_ast(args)
    try:
        expression = from_ast(ast, max_depth=settings.max_expression_depth)
    except ValueError as exc:
        _fail(str(exc))
    print(expression.format())


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="partialeval",
        description="PartialEval — częściowa ewaluacja wyrażeń arytmetycznych",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # demo
    sub.add_parser("demo", help="Uruchom przykład (x + 1) * -y oraz (x * y) + a")

    # eval
    p = sub.add_parser("eval", help="Ewaluuj JSON AST (plik lub stdin)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku z JSON AST")
    p.add_argument("--bind", "-b", action="append", default=[], type=_parse_binding,
                   metavar="NAZWA=WARTOŚĆ", help="Wartość zmiennej (wielokrotnie)")
    p.add_argument("--json", action="store_true", help="Wypisz wynik jako JSON")

    # format
    p = sub.add_parser("format", help="Wypisz strukturalny zapis JSON AST")
    p.add_argument("--file", "-f", help="Ścieżka do pliku z JSON AST")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "demo":   _demo,
        "eval":   _eval,
        "format": _format,
    }
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
