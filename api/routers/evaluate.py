"""
Router: POST /evaluate, POST /format
Częściowa ewaluacja drzewa przesłanego jako JSON AST.
"""
import logging

from fastapi import APIRouter, Depends

from adapters.evaluation_context.dict_context import DictEvaluationContext
from adapters.expression.ast_codec import from_ast, to_outcome
from api.dependencies import get_settings
from api.schemas import EvaluateRequest, FormatRequest, FormatResponse
from config import Settings
from contracts import EvalOutcome

logger = logging.getLogger("partial_eval.api")

router = APIRouter(tags=["evaluate"])


@router.post("/evaluate", response_model=EvalOutcome)
async def evaluate(
    body: EvaluateRequest,
    settings: Settings = Depends(get_settings),
) -> EvalOutcome:
    expression = from_ast(body.expression, max_depth=settings.max_expression_depth)
    context = DictEvaluationContext.from_mapping(body.bindings)
    result = expression.evaluate(context)
    logger.info("Evaluated %s → %s", expression.format(), result)
    return to_outcome(result)


@router.post("/format", response_model=FormatResponse)
async def format_expression(
    body: FormatRequest,
    settings: Settings = Depends(get_settings),
) -> FormatResponse:
    expression = from_ast(body.expression, max_depth=settings.max_expression_depth)
    return FormatResponse(
        formatted=expression.format(),
        variables=sorted(expression.variables()),
        depth=expression.depth(),
    )
