# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Adapters from native Python behavior containers to traits.

A container is enumerated once, when it is wrapped: the resulting
`MethodTable` is a snapshot, so later changes to the class, module or mapping
are not observed by the trait.
"""

from __future__ import annotations

import functools
import inspect
import types
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from traitkit.core.table import MethodImpl, MethodName, MethodTable
from traitkit.node import Leaf, TraitNode

_DESCRIPTOR_TYPES = (staticmethod, classmethod, property, functools.partialmethod)


def _is_dunder(name: str) -> bool:
	return name.startswith("__") and name.endswith("__")


def _class_members(cls: type) -> Dict[MethodName, MethodImpl]:
	members: Dict[MethodName, MethodImpl] = {}
	seen: set[str] = set()
	for klass in cls.__mro__:
		if klass is object:
			continue
		for name, value in vars(klass).items():
			# Nearest definition wins, as in attribute lookup.
			if _is_dunder(name) or name in seen:
				continue
			seen.add(name)
			if inspect.isfunction(value) or isinstance(value, _DESCRIPTOR_TYPES):
				members[name] = value
	return members


def _module_members(module: types.ModuleType) -> Dict[MethodName, MethodImpl]:
	members: Dict[MethodName, MethodImpl] = {}
	for name, value in vars(module).items():
		if name.startswith("_"):
			continue
		if inspect.isfunction(value) and value.__module__ == module.__name__:
			members[name] = value
	return members


def table_from_container(container: Any) -> MethodTable:
	"""
	Enumerate the methods of `container` into a `MethodTable`.

	Accepted containers:
	- a `MethodTable` (returned unchanged),
	- any mapping of method name to implementation (copied),
	- a class: functions and method descriptors defined in its body or
	  inherited from its bases (`object` excluded, nearest definition wins),
	  dunder names excluded,
	- a module: the public functions defined in that module.
	"""
	if isinstance(container, MethodTable):
		return container
	if isinstance(container, Mapping):
		return MethodTable(dict(container))
	if isinstance(container, type):
		return MethodTable(_class_members(container))
	if isinstance(container, types.ModuleType):
		return MethodTable(_module_members(container))
	raise TypeError(f"cannot build a trait from {type(container).__name__!s} value {container!r}")


def _container_name(container: Any) -> str:
	if isinstance(container, (type, types.ModuleType)):
		return container.__name__
	return "<trait>"


def wrap(container: Any, *, name: Optional[str] = None) -> TraitNode:
	"""Wrap a container (or table) into a leaf trait; nodes are returned as is."""
	if isinstance(container, TraitNode):
		return container
	return Leaf(table_from_container(container), name=name or _container_name(container))


def as_trait(value: Any) -> TraitNode:
	return wrap(value)


def trait(container: Any = None, *, name: Optional[str] = None) -> TraitNode | Callable[[Any], TraitNode]:
	"""
	Class decorator turning a class body into a leaf trait.

	    @trait
	    class Attacker:
	        def attack_points(self):
	            return 10

	`Attacker` is then a `Leaf`, ready for `+`, `-`, `&` and `attach`.
	`@trait(name="...")` overrides the label used in error messages.
	"""
	if container is None:
		return lambda c: wrap(c, name=name)
	return wrap(container, name=name)


__all__ = ["table_from_container", "wrap", "as_trait", "trait"]
