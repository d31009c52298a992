# (C) 2024 Irreducible Inc.

"""Parsing of polynomial expressions written in Python syntax.

Supported: integer literals, names, unary + and -, binary +, - and *, and powers with a non-negative integer
exponent written either as ** or ^.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING, Sequence

from ..errors import MalformedPolynomialError
from .indeterminate import Indeterminate, named
from .polynomial import Polynomial

if TYPE_CHECKING:
    from .polynomial_ring import PolynomialRing


def parse(ring: PolynomialRing, source: str, variables: Sequence[Indeterminate | str] | None = None) -> Polynomial:
    try:
        tree = ast.parse(source.replace("^", "**"), mode="eval")
    except SyntaxError as e:
        raise MalformedPolynomialError(f"cannot parse {source!r}: {e.msg}") from e

    indeterminates = None
    if variables is not None:
        indeterminates = [named(v) if isinstance(v, str) else v for v in variables]
    by_symbol = {ind.symbol: ind for ind in indeterminates or ()}

    def visit(node: ast.AST) -> Polynomial:
        if isinstance(node, ast.Constant) and type(node.value) is int:
            return ring.constant(node.value)
        if isinstance(node, ast.Name):
            if indeterminates is None:
                return ring.variable(node.id)
            if node.id not in by_symbol:
                raise MalformedPolynomialError(f"unknown variable {node.id!r}")
            return ring.variable(by_symbol[node.id])
        if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.USub):
            return ring.negate(visit(node.operand))
        if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.UAdd):
            return visit(node.operand)
        if isinstance(node, ast.BinOp):
            if isinstance(node.op, ast.Add):
                return ring.add(visit(node.left), visit(node.right))
            if isinstance(node.op, ast.Sub):
                return ring.subtract(visit(node.left), visit(node.right))
            if isinstance(node.op, ast.Mult):
                return ring.multiply(visit(node.left), visit(node.right))
            exponent = node.right
            if (
                isinstance(node.op, ast.Pow)
                and isinstance(exponent, ast.Constant)
                and type(exponent.value) is int
                and exponent.value >= 0
            ):
                return ring.pow(visit(node.left), exponent.value)
        raise MalformedPolynomialError(f"unsupported expression {ast.unparse(node)!r} in {source!r}")

    result = visit(tree.body)
    if indeterminates is not None:
        result = result.trim_indeterminates().align_indeterminates(indeterminates)
    return result
