from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from absl import logging

from transcriber.errors import MalformedRow, UnknownSymbol
from transcriber.reader import ParseTableRow, RawSymbol, read_ll1_rows
from transcriber.symbols import TerminalSymbol, resolve


@dataclass(frozen=True)
class Terminal:
	symbol: TerminalSymbol


@dataclass(frozen=True)
class NonTerminal:
	name: str


@dataclass(frozen=True)
class Action:
	"""Semantic action marker interleaved with grammar symbols."""

	name: str
	kind: str


SymbolRef = Union[Terminal, NonTerminal, Action]

ParseTableKey = Tuple[str, TerminalSymbol]
ParseTable = Dict[ParseTableKey, Tuple[SymbolRef, ...]]


def symbol_ref(raw: RawSymbol) -> SymbolRef:
	if raw.kind == "term":
		return Terminal(resolve(raw.name))
	if raw.kind == "nonterm":
		return NonTerminal(raw.name)
	return Action(raw.name, raw.kind)


def _resolve_header(names: Sequence[str]) -> List[TerminalSymbol]:
	out = []
	for column, name in enumerate(names):
		try:
			out.append(resolve(name))
		except UnknownSymbol:
			raise UnknownSymbol(name, {"row": 0, "column": column}) from None
	return out


def _production_body(cell: Sequence[RawSymbol], *, row: ParseTableRow, column: int) -> Tuple[SymbolRef, ...]:
	# cell[0] is the rule's left-hand-side marker, not part of the body
	body = []
	for raw in cell[1:]:
		try:
			body.append(symbol_ref(raw))
		except UnknownSymbol:
			raise UnknownSymbol(raw.name, {"row": row.index, "nonterminal": row.nonterminal, "column": column}) from None
	return tuple(body)


def build_parse_table(terminal_names: Sequence[str], rows: Iterable[ParseTableRow]) -> ParseTable:
	"""
	(nonterminal, lookahead terminal) -> production body.

	Cells are aligned to the header by position. Empty cells are error
	entries of the LL(1) table and produce no key.
	"""
	terminals = _resolve_header(terminal_names)
	table: ParseTable = {}

	n_rows = 0
	for row in rows:
		n_rows += 1
		if len(row.cells) != len(terminals):
			raise MalformedRow(row.index, expected=len(terminals), found=len(row.cells), context={"nonterminal": row.nonterminal})
		for column, (terminal, cell) in enumerate(zip(terminals, row.cells)):
			if cell is None:
				continue
			key = (row.nonterminal, terminal)
			if key in table:
				logging.warning("Row %d overwrites M[%s, %s]", row.index, row.nonterminal, terminal.kind.value)
			table[key] = _production_body(cell, row=row, column=column)

	logging.info("Transcribed %d parse table entries from %d rows x %d terminals", len(table), n_rows, len(terminals))
	return table


def transcribe_ll1_table(html: str) -> ParseTable:
	terminal_names, rows = read_ll1_rows(html)
	return build_parse_table(terminal_names, rows)
