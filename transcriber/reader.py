"""
Structural reader for the rendered grammar-analysis tables.

Two shapes are understood:

  First/Follow (`.stats`):
    <tr> column titles </tr>
    <tr><td><nonterm>E</nonterm></td><td>[symbols]</td><td>[symbols]</td></tr>

  LL(1) (`.parse_table`):
    <tr> <terminal>id</terminal> <terminal>$</terminal> ... </tr>
    <tr><th><nonterm>E</nonterm></th><td>[marker, symbols]</td> ... </tr>

Only symbol markup is reported; names are not resolved here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from transcriber.errors import MalformedRow, MissingHeader

FIRST_FOLLOW_SELECTOR = ".stats"
LL1_SELECTOR = ".parse_table"

SET_SYMBOL_TAGS = ("nonterm", "term")
PRODUCTION_SYMBOL_TAGS = ("nonterm", "term", "action")


@dataclass(frozen=True)
class RawSymbol:
	kind: str
	name: str


@dataclass(frozen=True)
class FirstFollowRow:
	index: int
	nonterminal: str
	first: Tuple[str, ...]
	follow: Tuple[str, ...]


Cell = Optional[Tuple[RawSymbol, ...]]


@dataclass(frozen=True)
class ParseTableRow:
	index: int
	nonterminal: str
	cells: Tuple[Cell, ...]


def load_document(html: str) -> BeautifulSoup:
	return BeautifulSoup(html, "lxml")


def table_rows(html: str, selector: str) -> List[Tag]:
	"""All `<tr>` elements of the first region matching `selector`, in document order."""
	region = load_document(html).select_one(selector)
	if region is None:
		raise MissingHeader(f"table region {selector!r}")
	return region.find_all("tr")


def _text(node: Tag) -> str:
	return node.get_text(strip=True)


def _symbols(cell: Tag, tags: Tuple[str, ...]) -> List[RawSymbol]:
	return [RawSymbol(node.name, _text(node)) for node in cell.find_all(list(tags))]


def read_first_follow_rows(html: str) -> Iterator[FirstFollowRow]:
	rows = table_rows(html, FIRST_FOLLOW_SELECTOR)
	# rows[0] holds the column titles
	for index, tr in enumerate(rows[1:], start=1):
		cells = tr.find_all("td", recursive=False)
		if len(cells) != 3:
			raise MalformedRow(index, expected=3, found=len(cells))

		name_node = cells[0].find("nonterm")
		if name_node is None:
			raise MissingHeader("nonterminal name cell", index)

		yield FirstFollowRow(
			index=index,
			nonterminal=_text(name_node),
			first=tuple(s.name for s in _symbols(cells[1], SET_SYMBOL_TAGS)),
			follow=tuple(s.name for s in _symbols(cells[2], SET_SYMBOL_TAGS)),
		)


def _production_rows(rows: List[Tag], width: int) -> Iterator[ParseTableRow]:
	for index, tr in enumerate(rows, start=1):
		name_node = tr.select_one("th > nonterm")
		if name_node is None:
			raise MissingHeader("production row header", index)

		tds = tr.find_all("td", recursive=False)
		if len(tds) != width:
			raise MalformedRow(index, expected=width, found=len(tds), context={"nonterminal": _text(name_node)})

		cells: List[Cell] = []
		for td in tds:
			symbols = _symbols(td, PRODUCTION_SYMBOL_TAGS)
			cells.append(tuple(symbols) if symbols else None)

		yield ParseTableRow(index=index, nonterminal=_text(name_node), cells=tuple(cells))


def read_ll1_rows(html: str) -> Tuple[Tuple[str, ...], Iterator[ParseTableRow]]:
	"""
	Returns (terminal column names, production rows).

	The header is read eagerly; production rows are produced lazily.
	"""
	rows = table_rows(html, LL1_SELECTOR)
	if not rows:
		raise MissingHeader("terminal header row")

	terminals = tuple(_text(node) for node in rows[0].find_all("terminal"))
	if not terminals:
		raise MissingHeader("terminal header row", 0)

	return terminals, _production_rows(rows[1:], len(terminals))
