# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type-mutation collaborators used by `attach`.

The trait algebra never touches a target type directly; it asks a
`TypeMutator` which names the target already has and to install one method at
a time. `ClassMutator` is the implementation for ordinary Python classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Set, runtime_checkable

from traitkit.core.table import MethodImpl, MethodName


@runtime_checkable
class TypeMutator(Protocol):
	def method_names(self, target: Any) -> Set[MethodName]:
		...

	def define_method(self, target: Any, name: MethodName, impl: MethodImpl) -> None:
		...


@dataclass(frozen=True)
class MutatorOptions:
	# Count names the target inherits from its bases (everything but `object`)
	# as already defined.
	include_inherited: bool = True


class ClassMutator:
	"""Installs methods on a Python class with `setattr`."""

	def __init__(self, options: MutatorOptions | None = None) -> None:
		self.options = options or MutatorOptions()

	def method_names(self, target: Any) -> Set[MethodName]:
		if not isinstance(target, type):
			raise TypeError(f"ClassMutator expects a class, got {type(target).__name__}")
		classes = target.__mro__ if self.options.include_inherited else (target,)
		names: Set[MethodName] = set()
		for klass in classes:
			if klass is object:
				continue
			names.update(vars(klass))
		return names

	def define_method(self, target: Any, name: MethodName, impl: MethodImpl) -> None:
		setattr(target, name, impl)


__all__ = ["TypeMutator", "MutatorOptions", "ClassMutator"]
