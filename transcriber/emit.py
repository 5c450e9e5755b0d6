"""
Render transcribed tables as Rust literals for the table-driven parser.

Output follows table iteration order, which is document order, so a
regenerated literal diffs cleanly against the committed one.
"""

from __future__ import annotations

from typing import List

from transcriber.first_follow import FirstFollowTable
from transcriber.parse_table import Action, NonTerminal, ParseTable, SymbolRef, Terminal
from transcriber.symbols import TerminalSymbol, TokenType

INDENT = "    "


def rust_str(value: str) -> str:
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def terminal_literal(symbol: TerminalSymbol) -> str:
	kind = symbol.kind
	if kind is TokenType.Id:
		return f"Type::Id({rust_str(str(symbol.payload))}.to_owned())"
	if kind is TokenType.IntNum:
		return f"Type::IntNum({int(symbol.payload)})"
	if kind is TokenType.FloatNum:
		return f"Type::FloatNum({float(symbol.payload):g}f64)"
	return f"Type::{kind.name}"


def symbol_ref_literal(ref: SymbolRef) -> str:
	if isinstance(ref, Terminal):
		return f"Production::Term({terminal_literal(ref.symbol)})"
	if isinstance(ref, NonTerminal):
		return f"Production::NonTerm({rust_str(ref.name)})"
	if isinstance(ref, Action):
		# the action text is already a constructor expression, e.g. create_marker()
		return f"Production::Action({ref.name})"
	raise TypeError(f"Not a symbol reference: {ref!r}")


def emit_set_table(table: FirstFollowTable, which: str) -> str:
	"""`which` selects the `first` or `follow` column of every entry."""
	if which not in ("first", "follow"):
		raise ValueError(f"Unknown set column: {which!r}")

	lines: List[str] = ["HashMap::from(["]
	for nonterminal, entry in table.items():
		symbols = ", ".join(terminal_literal(s) for s in getattr(entry, which))
		lines.append(f"{INDENT}({rust_str(nonterminal)}, vec![{symbols}]),")
	lines.append("])")
	return "\n".join(lines)


def emit_first_follow(table: FirstFollowTable) -> str:
	return "\n".join(
		[
			"First set:",
			emit_set_table(table, "first"),
			"Follow set:",
			emit_set_table(table, "follow"),
		]
	)


def emit_parse_table(table: ParseTable) -> str:
	lines: List[str] = []
	for (nonterminal, terminal), body in table.items():
		values = ", ".join(symbol_ref_literal(ref) for ref in body)
		lines.append(f"(({rust_str(nonterminal)}, {terminal_literal(terminal)}), vec![{values}]),")
	return "\n".join(lines)
