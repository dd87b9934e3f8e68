"""Validation package - constraint model, matchers and the validation engine."""

from .base import Constraint, ExactType, Predicate, UnionType, evaluate, to_constraint
from .engine import compile_declaration, validate
from .matchers import mapping_with, sequence_of, with_capabilities

__all__ = [
    "Constraint",
    "ExactType",
    "Predicate",
    "UnionType",
    "compile_declaration",
    "evaluate",
    "mapping_with",
    "sequence_of",
    "to_constraint",
    "validate",
    "with_capabilities",
]
