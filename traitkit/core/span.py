# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span used by trait-expression diagnostics.

A Span carries best-effort line/column info plus the raw parser object it was
built from (a lark `Token` or `UnexpectedInput`), so richer renderers can
recover parser-specific details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort line/column plus raw parser loc)."""

	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any) -> "Span":
		"""
		Construct a Span from a parser/location object.

		If `loc` is already a Span, it is returned unchanged.
		"""
		if loc is None:
			return cls()
		if isinstance(loc, cls):
			return loc
		return cls(
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			raw=loc,
		)

	def __str__(self) -> str:
		if self.line is None:
			return "<unknown>"
		if self.column is None:
			return f"{self.line}"
		return f"{self.line}:{self.column}"


__all__ = ["Span"]
