# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Trait expression trees.

A trait is a tree of immutable nodes:

  Leaf     a method table authored directly or derived from a container,
  Compose  the union of two or more child traits (`a + b`),
  Exclude  a child trait minus some method names (`a - "x"`),
  Alias    a child trait plus extra names bound to existing methods
           (`a & {"new": "old"}`).

Operators build new nodes and never touch their operands. Nothing is checked
until `resolve()` flattens the tree into one `MethodTable`; resolution is a
pure function of the tree, so resolving a node twice yields the same table or
raises the same error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from traitkit.checker import composition_conflicts
from traitkit.core.diagnostics import Diagnostic
from traitkit.core.errors import ComposedTraitConflict, TraitConflict
from traitkit.core.table import MethodName, MethodTable

logger = logging.getLogger(__name__)


def _coerce(value: Any) -> "TraitNode":
	# Deferred: the adapter builds leaves from this module.
	from traitkit.adapter import as_trait

	return as_trait(value)


def _names_arg(names: MethodName | Iterable[MethodName]) -> Tuple[MethodName, ...]:
	if isinstance(names, str):
		return (names,)
	out: List[MethodName] = []
	for name in names:
		if not isinstance(name, str):
			raise TypeError(f"method name must be a str, got {name!r}")
		if name not in out:
			out.append(name)
	return tuple(out)


def _renames_arg(renames: Mapping[MethodName, MethodName]) -> Tuple[Tuple[MethodName, MethodName], ...]:
	if not isinstance(renames, Mapping):
		raise TypeError(f"aliases must be a mapping of new name to existing name, got {type(renames).__name__}")
	for new_name, existing_name in renames.items():
		if not isinstance(new_name, str) or not isinstance(existing_name, str):
			raise TypeError(f"alias entries must map str to str, got {new_name!r}: {existing_name!r}")
	return tuple(renames.items())


def _operand_label(node: "TraitNode") -> str:
	if isinstance(node, Leaf):
		return node.label
	return f"({node.label})"


class TraitNode:
	"""Common operator surface shared by every node variant."""

	@property
	def label(self) -> str:
		raise NotImplementedError

	def resolve(self) -> MethodTable:
		raise NotImplementedError

	def compose(self, other: Any) -> "Compose":
		return Compose((self, _coerce(other)))

	def exclude(self, names: MethodName | Iterable[MethodName]) -> "Exclude":
		return Exclude(self, _names_arg(names))

	def alias(self, renames: Mapping[MethodName, MethodName]) -> "Alias":
		return Alias(self, _renames_arg(renames))

	def __add__(self, other: Any) -> "Compose":
		return self.compose(other)

	def __radd__(self, other: Any) -> "Compose":
		return _coerce(other).compose(self)

	def __sub__(self, names: MethodName | Iterable[MethodName]) -> "Exclude":
		return self.exclude(names)

	def __and__(self, renames: Mapping[MethodName, MethodName]) -> "Alias":
		return self.alias(renames)

	def method_names(self) -> frozenset[MethodName]:
		return self.resolve().names()

	def check(self) -> List[Diagnostic]:
		"""Resolve without raising; return the conflict as diagnostics."""
		try:
			self.resolve()
		except TraitConflict as err:
			return [err.to_diagnostic()]
		return []

	def __str__(self) -> str:
		return self.label


@dataclass(frozen=True, eq=False)
class Leaf(TraitNode):
	table: MethodTable
	name: str = "<trait>"

	def __post_init__(self) -> None:
		if not isinstance(self.table, MethodTable):
			raise TypeError(f"Leaf expects a MethodTable, got {type(self.table).__name__}")

	@property
	def label(self) -> str:
		return self.name

	def resolve(self) -> MethodTable:
		return self.table


@dataclass(frozen=True, eq=False)
class Compose(TraitNode):
	children: Tuple[TraitNode, ...]

	def __post_init__(self) -> None:
		if len(self.children) < 2:
			raise ValueError(f"Compose needs at least two traits, got {len(self.children)}")
		for child in self.children:
			if not isinstance(child, TraitNode):
				raise TypeError(f"Compose children must be trait nodes, got {type(child).__name__}")

	@property
	def label(self) -> str:
		return " + ".join(_operand_label(child) for child in self.children)

	def resolve(self) -> MethodTable:
		tables = [child.resolve() for child in self.children]
		shared = composition_conflicts(tables)
		if shared:
			owners = sorted({idx for idxs in shared.values() for idx in idxs})
			raise ComposedTraitConflict(
				traits=tuple(_operand_label(self.children[idx]) for idx in owners),
				names=tuple(shared),
			)
		merged: dict[MethodName, Any] = {}
		for table in tables:
			merged.update(table)
		logger.debug("resolved %s to %d method(s)", self.label, len(merged))
		return MethodTable(merged)


@dataclass(frozen=True, eq=False)
class Exclude(TraitNode):
	base: TraitNode
	removed: Tuple[MethodName, ...] = field(default=())

	@property
	def label(self) -> str:
		if len(self.removed) == 1:
			return f"{_operand_label(self.base)} - {self.removed[0]}"
		return f"{_operand_label(self.base)} - [{', '.join(self.removed)}]"

	def resolve(self) -> MethodTable:
		return self.base.resolve().remove(self.removed)


@dataclass(frozen=True, eq=False)
class Alias(TraitNode):
	base: TraitNode
	renames: Tuple[Tuple[MethodName, MethodName], ...] = field(default=())

	@property
	def label(self) -> str:
		pairs = ", ".join(f"{new}: {old}" for new, old in self.renames)
		return f"{_operand_label(self.base)} & {{{pairs}}}"

	def resolve(self) -> MethodTable:
		# Applied in order: a later alias may point at a name an earlier one added.
		table = self.base.resolve()
		for new_name, existing_name in self.renames:
			table = table.rename(new_name, existing_name)
		return table


__all__ = ["TraitNode", "Leaf", "Compose", "Exclude", "Alias"]
