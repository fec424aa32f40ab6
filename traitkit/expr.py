# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Textual trait expressions.

`parse_trait_expr` builds a trait tree from source text such as

    Attacker + Defender - :life & {guard: defense_points}

using the lark grammar shipped next to this module. Trait names are looked
up in a caller-supplied environment (name -> trait node or container);
method names are taken literally, with an optional leading colon.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from traitkit.adapter import as_trait
from traitkit.core.diagnostics import Diagnostic
from traitkit.core.span import Span
from traitkit.node import TraitNode

_GRAMMAR_PATH = Path(__file__).with_name("trait_expr.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)


class TraitExprError(ValueError):
	"""
	User-facing error for a malformed or unresolvable trait expression.

	Carries a best-effort location (`loc`) so callers can render a pinned
	diagnostic instead of a raw parser exception.
	"""

	code = "E-TRAIT-EXPR"

	def __init__(self, message: str, *, loc: Span | None = None) -> None:
		super().__init__(message)
		self.message = message
		self.loc = loc or Span()

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(message=self.message, code=self.code, phase="parser", span=self.loc)


def _name(node: object) -> str | None:
	return node.data if isinstance(node, Tree) else None


def _method_name(node: Tree) -> str:
	tok = node.children[0]
	if not isinstance(tok, Token):
		raise TypeError(f"Expected method name token, got {type(tok)}")
	return tok.value[1:] if tok.type == "SYMBOL" else tok.value


def _build(node: Tree, env: Mapping[str, Any]) -> TraitNode:
	kind = _name(node)
	if kind == "ref":
		tok = node.children[0]
		if tok.value not in env:
			raise TraitExprError(f"unknown trait '{tok.value}'", loc=Span.from_loc(tok))
		return as_trait(env[tok.value])
	if kind == "compose":
		left, right = node.children
		return _build(left, env).compose(_build(right, env))
	if kind == "exclude":
		base, names = node.children
		return _build(base, env).exclude([_method_name(c) for c in names.children])
	if kind == "alias":
		base, alias_map = node.children
		renames: Dict[str, str] = {}
		for entry in alias_map.children:
			new_name, existing_name = (_method_name(c) for c in entry.children)
			renames[new_name] = existing_name
		return _build(base, env).alias(renames)
	raise TypeError(f"unexpected trait expression node {kind!r}")


def parse_trait_expr(source: str, env: Mapping[str, Any]) -> TraitNode:
	"""Parse `source` into a trait tree, resolving trait names through `env`."""
	try:
		tree = _PARSER.parse(source)
	except UnexpectedInput as err:
		context = err.get_context(source).rstrip()
		raise TraitExprError(f"invalid trait expression:\n{context}", loc=Span.from_loc(err)) from err
	return _build(tree, env)


def check_trait_expr(source: str, env: Mapping[str, Any]) -> List[Diagnostic]:
	"""Parse and resolve `source`; report problems as diagnostics instead of raising."""
	try:
		node = parse_trait_expr(source, env)
	except TraitExprError as err:
		return [err.to_diagnostic()]
	return node.check()


__all__ = ["TraitExprError", "parse_trait_expr", "check_trait_expr"]
