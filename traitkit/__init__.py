# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
traitkit: composable traits for Python classes.

Traits are immutable trees of method tables combined with `+` (compose),
`-` (exclude) and `&` (alias). Name collisions are reported as
`TraitConflict` errors when the tree is resolved or attached, never resolved
silently by ordering.
"""

import logging

from .core import (
	Diagnostic,
	Span,
	TraitConflict,
	DuplicateKey,
	NameCollision,
	UnknownSource,
	ComposedTraitConflict,
	IncludedTraitConflict,
	MethodTable,
)
from .node import TraitNode, Leaf, Compose, Exclude, Alias
from .adapter import table_from_container, wrap, as_trait, trait
from .mutator import TypeMutator, MutatorOptions, ClassMutator
from .attach import attach, uses
from .expr import TraitExprError, parse_trait_expr, check_trait_expr

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
	"Diagnostic",
	"Span",
	"TraitConflict",
	"DuplicateKey",
	"NameCollision",
	"UnknownSource",
	"ComposedTraitConflict",
	"IncludedTraitConflict",
	"MethodTable",
	"TraitNode",
	"Leaf",
	"Compose",
	"Exclude",
	"Alias",
	"table_from_container",
	"wrap",
	"as_trait",
	"trait",
	"TypeMutator",
	"MutatorOptions",
	"ClassMutator",
	"attach",
	"uses",
	"TraitExprError",
	"parse_trait_expr",
	"check_trait_expr",
]
