"""Tests for emit."""

import re

from absl.testing import absltest
from absl.testing import parameterized

from transcriber import emit
from transcriber.first_follow import FirstFollowEntry, transcribe_first_follow
from transcriber.parse_table import Action, NonTerminal, Terminal, transcribe_ll1_table
from transcriber.symbols import TERMINALS, resolve
from transcriber.test_utils import first_follow_document, ll1_document

_LITERAL_TO_SYMBOL = {emit.terminal_literal(s): s for s in TERMINALS.values()}
_TERMINAL = "(?:" + "|".join(re.escape(k) for k in sorted(_LITERAL_TO_SYMBOL, key=len, reverse=True)) + ")"

_SET_LINE = re.compile(r'^    \("(?P<key>[^"]*)", vec!\[(?P<values>.*)\]\),$')
_TABLE_LINE = re.compile(r'^\(\("(?P<nt>[^"]*)", (?P<terminal>' + _TERMINAL + r')\), vec!\[(?P<values>.*)\]\),$')
_PRODUCTION = re.compile(r'Production::(Term|NonTerm|Action)\((' + _TERMINAL + r'|"[^"]*"|\w+\(\))\)')


def _split_literals(values):
	return re.findall(_TERMINAL, values)


def _reparse_set_table(text):
	lines = text.splitlines()
	assert lines[0] == "HashMap::from([" and lines[-1] == "])"
	out = []
	for line in lines[1:-1]:
		m = _SET_LINE.match(line)
		out.append((m.group("key"), tuple(_LITERAL_TO_SYMBOL[v] for v in _split_literals(m.group("values")))))
	return out


def _reparse_ref(kind, value):
	if kind == "Term":
		return Terminal(_LITERAL_TO_SYMBOL[value])
	if kind == "NonTerm":
		return NonTerminal(value.strip('"'))
	return Action(value, "action")


def _reparse_parse_table(text):
	out = []
	for line in text.splitlines():
		m = _TABLE_LINE.match(line)
		body = tuple(_reparse_ref(k, v) for k, v in _PRODUCTION.findall(m.group("values")))
		out.append(((m.group("nt"), _LITERAL_TO_SYMBOL[m.group("terminal")]), body))
	return out


class TerminalLiteralTest(parameterized.TestCase):

	@parameterized.parameters(
		("id", 'Type::Id("".to_owned())'),
		("intlit", "Type::IntNum(0)"),
		("floatlit", "Type::FloatNum(0f64)"),
		("$", "Type::EndOfFile"),
		("lpar", "Type::OpenPar"),
		("neq", "Type::NotEq"),
		("self", "Type::SelfT"),
		("arrow", "Type::ReturnType"),
	)
	def test_literal(self, raw, expected):
		self.assertEqual(emit.terminal_literal(resolve(raw)), expected)

	def test_symbol_refs(self):
		self.assertEqual(
			emit.symbol_ref_literal(Terminal(resolve("id"))),
			'Production::Term(Type::Id("".to_owned()))',
		)
		self.assertEqual(emit.symbol_ref_literal(NonTerminal("EXPR")), 'Production::NonTerm("EXPR")')
		self.assertEqual(
			emit.symbol_ref_literal(Action("create_marker()", "action")),
			"Production::Action(create_marker())",
		)

	def test_string_escaping(self):
		self.assertEqual(emit.rust_str('a"b\\c'), '"a\\"b\\\\c"')


class EmitFirstFollowTest(absltest.TestCase):

	def test_layout(self):
		table = {
			"Expr": FirstFollowEntry(first=(resolve("id"), resolve("intlit")), follow=(resolve("semi"),)),
			"Term": FirstFollowEntry(first=(), follow=(resolve("$"),)),
		}
		expected = "\n".join(
			[
				"First set:",
				"HashMap::from([",
				'    ("Expr", vec![Type::Id("".to_owned()), Type::IntNum(0)]),',
				'    ("Term", vec![]),',
				"])",
				"Follow set:",
				"HashMap::from([",
				'    ("Expr", vec![Type::Semi]),',
				'    ("Term", vec![Type::EndOfFile]),',
				"])",
			]
		)
		self.assertEqual(emit.emit_first_follow(table), expected)

	def test_unknown_column(self):
		with self.assertRaises(ValueError):
			emit.emit_set_table({}, "predict")

	def test_round_trip_and_order(self):
		html = first_follow_document(
			[
				("B", ["id", "floatlit"], ["semi", "comma"]),
				("A", ["lpar"], ["$"]),
			]
		)
		table = transcribe_first_follow(html)
		self.assertEqual(
			_reparse_set_table(emit.emit_set_table(table, "first")),
			[(k, v.first) for k, v in table.items()],
		)
		self.assertEqual(
			_reparse_set_table(emit.emit_set_table(table, "follow")),
			[(k, v.follow) for k, v in table.items()],
		)
		text = emit.emit_first_follow(table)
		self.assertLess(text.index('("B"'), text.index('("A"'))

	def test_pipeline_is_idempotent(self):
		html = first_follow_document([("A", ["id"], ["$"]), ("B", ["plus", "minus"], ["rpar"])])
		first = emit.emit_first_follow(transcribe_first_follow(html))
		second = emit.emit_first_follow(transcribe_first_follow(html))
		self.assertEqual(first, second)


class EmitParseTableTest(absltest.TestCase):

	def _document(self):
		return ll1_document(
			["id", "plus", "$"],
			[
				(
					"Expr",
					[
						[("nonterm", "Expr"), ("term", "id"), ("nonterm", "Term")],
						None,
						[("nonterm", "Expr"), ("action", "create_marker()"), ("term", "$"), ("nonterm", "Term")],
					],
				),
				("Term", [None, [("nonterm", "Term")], None]),
			],
		)

	def test_layout(self):
		text = emit.emit_parse_table(transcribe_ll1_table(self._document()))
		expected = "\n".join(
			[
				'(("Expr", Type::Id("".to_owned())), vec![Production::Term(Type::Id("".to_owned())), Production::NonTerm("Term")]),',
				'(("Expr", Type::EndOfFile), vec![Production::Action(create_marker()), Production::Term(Type::EndOfFile), Production::NonTerm("Term")]),',
				'(("Term", Type::Plus), vec![]),',
			]
		)
		self.assertEqual(text, expected)

	def test_round_trip(self):
		table = transcribe_ll1_table(self._document())
		self.assertEqual(_reparse_parse_table(emit.emit_parse_table(table)), list(table.items()))

	def test_empty_table(self):
		self.assertEqual(emit.emit_parse_table({}), "")

	def test_pipeline_is_idempotent(self):
		html = self._document()
		self.assertEqual(
			emit.emit_parse_table(transcribe_ll1_table(html)),
			emit.emit_parse_table(transcribe_ll1_table(html)),
		)


if __name__ == "__main__":
	absltest.main()
