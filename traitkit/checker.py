# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Conflict detection for trait composition and attachment.

Both checks are pure and report every offending name at once; callers turn a
non-empty result into a single error and never apply the non-conflicting
remainder.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from traitkit.core.table import MethodName, MethodTable


def composition_conflicts(tables: Sequence[MethodTable]) -> Dict[MethodName, List[int]]:
	"""
	Return every method name defined by two or more of `tables`.

	The result maps each shared name to the indexes of the tables defining it,
	in table order. Names are inserted in sorted order so the mapping is
	deterministic regardless of table iteration order.
	"""
	owners: Dict[MethodName, List[int]] = {}
	for idx, table in enumerate(tables):
		for name in table:
			owners.setdefault(name, []).append(idx)
	return {name: owners[name] for name in sorted(owners) if len(owners[name]) > 1}


def attachment_conflicts(table: MethodTable, existing_names: Iterable[MethodName]) -> List[MethodName]:
	"""Return the sorted names of `table` that the target already defines."""
	existing = set(existing_names)
	return sorted(name for name in table if name in existing)


__all__ = ["composition_conflicts", "attachment_conflicts"]
