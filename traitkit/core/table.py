# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Immutable method tables.

A `MethodTable` maps method names to opaque implementations. The table never
inspects or calls an implementation; only name equality and implementation
identity matter. Every operation returns a new table and leaves the receiver
untouched, so tables can be shared freely between trait expressions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Tuple

from .errors import DuplicateKey, NameCollision, UnknownSource

MethodName = str
MethodImpl = Any


def _check_name(name: object) -> MethodName:
	if not isinstance(name, str) or not name:
		raise TypeError(f"method name must be a non-empty str, got {name!r}")
	return name


class MethodTable(Mapping):
	"""Read-only mapping from method name to implementation."""

	__slots__ = ("_entries",)

	def __init__(self, entries: Mapping[MethodName, MethodImpl] | Iterable[Tuple[MethodName, MethodImpl]] = ()) -> None:
		items = entries.items() if isinstance(entries, Mapping) else entries
		built: Dict[MethodName, MethodImpl] = {}
		for name, impl in items:
			name = _check_name(name)
			if name in built:
				raise DuplicateKey(name=name)
			built[name] = impl
		self._entries = built

	@classmethod
	def _from_dict(cls, entries: Dict[MethodName, MethodImpl]) -> "MethodTable":
		table = cls.__new__(cls)
		table._entries = entries
		return table

	@classmethod
	def empty(cls) -> "MethodTable":
		return cls._from_dict({})

	def __getitem__(self, name: MethodName) -> MethodImpl:
		return self._entries[name]

	def __iter__(self) -> Iterator[MethodName]:
		return iter(self._entries)

	def __len__(self) -> int:
		return len(self._entries)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, MethodTable):
			return NotImplemented
		if self._entries.keys() != other._entries.keys():
			return False
		return all(impl is other._entries[name] for name, impl in self._entries.items())

	def __hash__(self) -> int:
		return hash(frozenset((name, id(impl)) for name, impl in self._entries.items()))

	def __repr__(self) -> str:
		return f"MethodTable({sorted(self._entries)!r})"

	def names(self) -> frozenset[MethodName]:
		return frozenset(self._entries)

	def insert(self, name: MethodName, impl: MethodImpl) -> "MethodTable":
		name = _check_name(name)
		if name in self._entries:
			raise DuplicateKey(name=name)
		entries = dict(self._entries)
		entries[name] = impl
		return self._from_dict(entries)

	def merge(self, other: "MethodTable") -> "MethodTable":
		"""Union of two tables; any shared name is a `NameCollision`."""
		shared = self._entries.keys() & other._entries.keys()
		if shared:
			raise NameCollision(names=tuple(sorted(shared)))
		entries = dict(self._entries)
		entries.update(other._entries)
		return self._from_dict(entries)

	def remove(self, names: Iterable[MethodName]) -> "MethodTable":
		"""Drop `names`; names the table does not define are ignored."""
		drop = set(names)
		return self._from_dict({name: impl for name, impl in self._entries.items() if name not in drop})

	def rename(self, new_name: MethodName, existing_name: MethodName) -> "MethodTable":
		"""
		Bind `new_name` to the implementation of `existing_name`.

		Both names resolve to the same implementation afterwards. An existing
		`new_name` is overwritten (the last alias wins).
		"""
		new_name = _check_name(new_name)
		if existing_name not in self._entries:
			raise UnknownSource(alias=new_name, source=existing_name)
		entries = dict(self._entries)
		entries[new_name] = self._entries[existing_name]
		return self._from_dict(entries)


__all__ = ["MethodName", "MethodImpl", "MethodTable"]
