from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Tuple

from absl import logging

from transcriber.errors import UnknownSymbol
from transcriber.reader import FirstFollowRow, read_first_follow_rows
from transcriber.symbols import TerminalSymbol, resolve


@dataclass(frozen=True)
class FirstFollowEntry:
	first: Tuple[TerminalSymbol, ...]
	follow: Tuple[TerminalSymbol, ...]


FirstFollowTable = Dict[str, FirstFollowEntry]


def _resolve_all(names: Sequence[str], *, row: FirstFollowRow, column: str) -> Tuple[TerminalSymbol, ...]:
	out = []
	for name in names:
		try:
			out.append(resolve(name))
		except UnknownSymbol:
			raise UnknownSymbol(name, {"row": row.index, "nonterminal": row.nonterminal, "column": column}) from None
	return tuple(out)


def build_first_follow(rows: Iterable[FirstFollowRow]) -> FirstFollowTable:
	"""
	Nonterminal -> (FIRST, FOLLOW), keyed in row order.

	Set members keep their column order. A repeated nonterminal keeps the
	position of its first row and the sets of its last row.
	"""
	table: FirstFollowTable = {}
	for row in rows:
		entry = FirstFollowEntry(
			first=_resolve_all(row.first, row=row, column="first"),
			follow=_resolve_all(row.follow, row=row, column="follow"),
		)
		if row.nonterminal in table:
			logging.warning("Row %d repeats nonterminal %r; keeping the later sets", row.index, row.nonterminal)
		table[row.nonterminal] = entry

	logging.info("Transcribed FIRST/FOLLOW sets for %d nonterminals", len(table))
	return table


def transcribe_first_follow(html: str) -> FirstFollowTable:
	return build_first_follow(read_first_follow_rows(html))
