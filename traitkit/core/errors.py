# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Trait conflict errors.

Every failure of the trait algebra is a `TraitConflict`. Each concrete error
is a dataclass: the payload (offending names, trait/target labels) is the
error's identity, the human message is derived from it on demand. Fields are
read-only by convention; the interpreter itself writes `__traceback__` and
friends while the error propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Tuple

from .diagnostics import Diagnostic


class TraitConflict(Exception):
	"""Base class for every error raised by trait resolution or attachment."""

	code = "E-TRAIT"
	phase = "traits"

	def __post_init__(self) -> None:
		# Positional args in field order, so pickle and copy can rebuild the error.
		Exception.__init__(self, *(getattr(self, f.name) for f in fields(self)))

	def __str__(self) -> str:
		return self.format_human()

	def format_human(self) -> str:
		raise NotImplementedError

	def offending_names(self) -> Tuple[str, ...]:
		return ()

	def to_dict(self) -> dict[str, Any]:
		raise NotImplementedError

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.format_human(),
			code=self.code,
			phase=self.phase,
			severity="error",
			notes=[f"method '{name}'" for name in self.offending_names()],
		)


def _join(names: Tuple[str, ...]) -> str:
	return ", ".join(names)


@dataclass(unsafe_hash=True)
class DuplicateKey(TraitConflict):
	"""A method name was inserted into a table that already defines it."""

	name: str

	code = "E-TRAIT-DUPLICATE-KEY"

	def format_human(self) -> str:
		return f"The method {self.name} is already defined in this method table."

	def offending_names(self) -> Tuple[str, ...]:
		return (self.name,)

	def to_dict(self) -> dict[str, Any]:
		return {"reason_code": self.code, "name": self.name}


@dataclass(unsafe_hash=True)
class NameCollision(TraitConflict):
	"""Two tables being merged define some of the same method names."""

	names: Tuple[str, ...]

	code = "E-TRAIT-NAME-COLLISION"

	def format_human(self) -> str:
		return f"The method(s) {_join(self.names)} are defined in both method tables."

	def offending_names(self) -> Tuple[str, ...]:
		return self.names

	def to_dict(self) -> dict[str, Any]:
		return {"reason_code": self.code, "names": list(self.names)}


@dataclass(unsafe_hash=True)
class UnknownSource(TraitConflict):
	"""An alias points at a method the trait does not define."""

	alias: str
	source: str

	code = "E-TRAIT-UNKNOWN-SOURCE"

	def format_human(self) -> str:
		return f"Cannot alias {self.alias} to {self.source}: the method {self.source} is not defined."

	def offending_names(self) -> Tuple[str, ...]:
		return (self.source,)

	def to_dict(self) -> dict[str, Any]:
		return {"reason_code": self.code, "alias": self.alias, "source": self.source}


@dataclass(unsafe_hash=True)
class ComposedTraitConflict(TraitConflict):
	"""Two or more composed traits define the same method names."""

	traits: Tuple[str, ...]
	names: Tuple[str, ...]

	code = "E-TRAIT-COMPOSE-CONFLICT"

	def format_human(self) -> str:
		return (
			f"The trait combination between {' and '.join(self.traits)} does not properly resolve a "
			f"method conflict. The method(s) {_join(self.names)} are defined multiple times."
		)

	def offending_names(self) -> Tuple[str, ...]:
		return self.names

	def to_dict(self) -> dict[str, Any]:
		return {"reason_code": self.code, "traits": list(self.traits), "names": list(self.names)}


@dataclass(unsafe_hash=True)
class IncludedTraitConflict(TraitConflict):
	"""A resolved trait defines names the target type already has."""

	target: str
	trait: str
	names: Tuple[str, ...]

	code = "E-TRAIT-INCLUDE-CONFLICT"
	phase = "attach"

	def format_human(self) -> str:
		return (
			f"The class {self.target} does not properly resolve a method conflict while including "
			f"the trait {self.trait}. The method(s) {_join(self.names)} were already defined."
		)

	def offending_names(self) -> Tuple[str, ...]:
		return self.names

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.code,
			"target": self.target,
			"trait": self.trait,
			"names": list(self.names),
		}


__all__ = [
	"TraitConflict",
	"DuplicateKey",
	"NameCollision",
	"UnknownSource",
	"ComposedTraitConflict",
	"IncludedTraitConflict",
]
