"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import ExprAST


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: ExprAST
    bindings: dict[str, float] = Field(default_factory=dict)


# ─────────────────────────── /format ─────────────────────────────

class FormatRequest(BaseModel):
    expression: ExprAST


class FormatResponse(BaseModel):
    formatted: str
    variables: list[str]
    depth: int


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
