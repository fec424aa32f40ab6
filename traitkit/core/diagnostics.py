# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for trait conflicts and expression errors.

A diagnostic is the display-side view of a `TraitConflict` (or a
`TraitExprError`): a message plus a stable code and one note per offending
method name. Callers that prefer to collect problems instead of catching
exceptions (see `TraitNode.check`) work with these records.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a trait diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Optional phase label ("traits" for resolution, "attach" for attachment,
	# "parser" for trait expressions).
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def to_dict(self) -> dict[str, object]:
		return {
			"message": self.message,
			"code": self.code,
			"phase": self.phase,
			"severity": self.severity,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
