from __future__ import annotations

import pytest

from adapters.evaluation_context.dict_context import DictEvaluationContext
from contracts import Found, NotFound
from ports.evaluation_context import EvaluationContext


def test_bind_supports_fluent_chaining():
    ctx = DictEvaluationContext.empty()

    assert ctx.bind("x", 1).bind("y", 2) is ctx
    assert ctx.resolve("x") == Found(1.0)
    assert ctx.resolve("y") == Found(2.0)


def test_resolve_missing_name_returns_not_found():
    assert DictEvaluationContext.empty().resolve("z") == NotFound()


def test_later_binding_overwrites_earlier():
    ctx = DictEvaluationContext.empty().bind("x", 1).bind("x", 5)

    assert ctx.resolve("x") == Found(5.0)
    assert len(ctx) == 1


def test_extended_returns_independent_copy():
    base = DictEvaluationContext.from_mapping({"x": 2})

    extended = base.extended(y=3)

    assert "y" in extended
    assert "y" not in base
    assert extended.names() == ["x", "y"]


def test_bind_rejects_empty_name():
    with pytest.raises(ValueError):
        DictEvaluationContext.empty().bind("", 1)


def test_dict_context_satisfies_protocol():
    assert isinstance(DictEvaluationContext.empty(), EvaluationContext)
