# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from .diagnostics import Diagnostic
from .span import Span
from .errors import (
	TraitConflict,
	DuplicateKey,
	NameCollision,
	UnknownSource,
	ComposedTraitConflict,
	IncludedTraitConflict,
)
from .table import MethodName, MethodImpl, MethodTable

__all__ = [
	"Diagnostic",
	"Span",
	"TraitConflict",
	"DuplicateKey",
	"NameCollision",
	"UnknownSource",
	"ComposedTraitConflict",
	"IncludedTraitConflict",
	"MethodName",
	"MethodImpl",
	"MethodTable",
]
