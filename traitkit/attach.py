# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Attachment of resolved traits to target types.

`attach` is the only operation with a side effect: it resolves the trait,
refuses any name the target already defines, then installs every method
through a `TypeMutator`. A target's method set only ever grows.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from traitkit.adapter import as_trait
from traitkit.checker import attachment_conflicts
from traitkit.core.errors import IncludedTraitConflict
from traitkit.core.table import MethodTable
from traitkit.mutator import ClassMutator, TypeMutator
from traitkit.node import TraitNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _target_label(target: Any) -> str:
	return getattr(target, "__qualname__", None) or getattr(target, "__name__", None) or repr(target)


def _attach_all(traits: Sequence[Any], target: Any, mutator: Optional[TypeMutator]) -> None:
	# Every trait is resolved and checked before the first method is installed;
	# later traits are checked against the names earlier ones will add.
	if mutator is None:
		mutator = ClassMutator()
	existing = set(mutator.method_names(target))
	planned: List[Tuple[TraitNode, MethodTable]] = []
	for trait in traits:
		node = as_trait(trait)
		table = node.resolve()
		clashing = attachment_conflicts(table, existing)
		if clashing:
			raise IncludedTraitConflict(target=_target_label(target), trait=node.label, names=tuple(clashing))
		existing.update(table)
		planned.append((node, table))
	for node, table in planned:
		for name, impl in table.items():
			mutator.define_method(target, name, impl)
		logger.debug("attached %s to %s: %s", node.label, _target_label(target), ", ".join(sorted(table)))


def attach(trait: Any, target: Any, *, mutator: Optional[TypeMutator] = None) -> None:
	"""
	Install the methods of `trait` onto `target`.

	Resolution errors propagate unchanged. If any resolved name already exists
	on the target, `IncludedTraitConflict` is raised and nothing is installed.
	"""
	_attach_all((trait,), target, mutator)


def uses(*traits: Any, mutator: Optional[TypeMutator] = None) -> Callable[[T], T]:
	"""
	Class decorator attaching several traits at once.

	    @uses(Attacker + Defender - "life", Healer)
	    class Warrior:
	        pass

	Traits are checked in order, as if attached one after another, but the
	class is only modified once all of them pass: a conflict in any trait
	leaves it untouched.
	"""

	def _apply(cls: T) -> T:
		_attach_all(traits, cls, mutator)
		return cls

	return _apply


__all__ = ["attach", "uses"]
