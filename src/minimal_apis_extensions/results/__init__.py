"""Typed results: Ok, Problem, ValidationProblem."""

from __future__ import annotations

from .ok import Ok
from .problem import PROBLEM_JSON_CONTENT_TYPE, Problem, ValidationProblem

__all__ = [
    "PROBLEM_JSON_CONTENT_TYPE",
    "Ok",
    "Problem",
    "ValidationProblem",
]
