"""
Write transcribed tables as spreadsheet-friendly files.

CSV files:
  - FIRST.csv, FOLLOW.csv   (nonterminal, space separated terminal names)
  - ParseTable.csv          (nonterminal, terminal, production body)

Workbook:
  - LL1_Tables.xlsx         (one sheet per table present)

Rows keep document order; terminals use the lexer's display names.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import openpyxl
from openpyxl.utils import get_column_letter

from transcriber.first_follow import FirstFollowTable
from transcriber.parse_table import Action, NonTerminal, ParseTable, SymbolRef, Terminal
from transcriber.symbols import display_name

Row = List[str]


def fmt_ref(ref: SymbolRef) -> str:
	if isinstance(ref, Terminal):
		return display_name(ref.symbol)
	if isinstance(ref, NonTerminal):
		return f"<{ref.name}>"
	if isinstance(ref, Action):
		return f"[{ref.name}]"
	raise TypeError(f"Not a symbol reference: {ref!r}")


def fmt_body(body: Sequence[SymbolRef]) -> str:
	return " ".join(fmt_ref(ref) for ref in body) if body else "eps"


def set_rows(table: FirstFollowTable, which: str) -> List[Row]:
	rows: List[Row] = [["NonTerminal", which.upper()]]
	for nt, entry in table.items():
		rows.append([nt, " ".join(display_name(s) for s in getattr(entry, which))])
	return rows


def parse_table_rows(table: ParseTable) -> List[Row]:
	rows: List[Row] = [["NonTerminal", "Terminal", "Production"]]
	for (nt, terminal), body in table.items():
		rows.append([nt, display_name(terminal), fmt_body(body)])
	return rows


def write_csv(path: Path, rows: Iterable[Row]) -> None:
	with path.open("w", newline="", encoding="utf-8") as f:
		w = csv.writer(f)
		w.writerows(rows)


def write_xlsx(path: Path, sheets: Sequence[tuple]) -> None:
	"""`sheets` is a sequence of (title, rows)."""
	wb = openpyxl.Workbook()
	wb.remove(wb.active)

	for title, rows in sheets:
		ws = wb.create_sheet(title)
		for row in rows:
			ws.append(row)

		# Basic column sizing
		for col in range(1, ws.max_column + 1):
			letter = get_column_letter(col)
			ws.column_dimensions[letter].width = 22 if col == 1 else 18

	wb.save(path)


def export_tables(
	out_dir: Path,
	*,
	first_follow: Optional[FirstFollowTable] = None,
	parse_table: Optional[ParseTable] = None,
) -> List[Path]:
	"""Writes every table given; returns the written paths."""
	out_dir.mkdir(parents=True, exist_ok=True)
	written: List[Path] = []
	sheets = []

	if first_follow is not None:
		for which, filename in (("first", "FIRST.csv"), ("follow", "FOLLOW.csv")):
			rows = set_rows(first_follow, which)
			write_csv(out_dir / filename, rows)
			written.append(out_dir / filename)
			sheets.append((which.upper(), rows))

	if parse_table is not None:
		rows = parse_table_rows(parse_table)
		write_csv(out_dir / "ParseTable.csv", rows)
		written.append(out_dir / "ParseTable.csv")
		sheets.append(("ParseTable", rows))

	if sheets:
		write_xlsx(out_dir / "LL1_Tables.xlsx", sheets)
		written.append(out_dir / "LL1_Tables.xlsx")

	return written
