from __future__ import annotations

from typing import Any, Dict, Optional


class TranscriptionError(Exception):
	"""Base class for every defect that aborts a transcription run."""

	def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
		super().__init__(message)
		self.message = message
		self.context: Dict[str, Any] = dict(context or {})

	def __str__(self) -> str:
		if not self.context:
			return self.message
		details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
		return f"{self.message} ({details})"


class UnknownSymbol(TranscriptionError):
	def __init__(self, raw_name: str, context: Optional[Dict[str, Any]] = None) -> None:
		super().__init__(f"Unknown terminal name: {raw_name!r}", context)
		self.raw_name = raw_name


class MalformedRow(TranscriptionError):
	def __init__(self, row_index: int, expected: int, found: int, context: Optional[Dict[str, Any]] = None) -> None:
		ctx = {"row": row_index}
		ctx.update(context or {})
		super().__init__(f"Expected {expected} cells but found {found}", ctx)
		self.row_index = row_index
		self.expected = expected
		self.found = found


class MissingHeader(TranscriptionError):
	def __init__(self, what: str, row_index: Optional[int] = None) -> None:
		super().__init__(f"Missing {what}", {"row": row_index} if row_index is not None else None)
		self.what = what
		self.row_index = row_index
