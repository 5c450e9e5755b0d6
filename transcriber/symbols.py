"""
Canonical terminal vocabulary shared by every table builder.

Raw names are the lexical token names used in the rendered grammar tables
(e.g. `lpar`, `intlit`, `$`). Each maps to exactly one `TerminalSymbol`;
several spellings may map to the same symbol.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from transcriber.errors import UnknownSymbol


class TokenType(Enum):
	"""Token kinds of the consuming parser. Values are the lexer's display names."""

	EndOfFile = "$"
	Id = "id"
	IntNum = "intnum"
	FloatNum = "floatnum"
	Eq = "eq"
	NotEq = "noteq"
	Lt = "lt"
	Gt = "gt"
	LEq = "leq"
	GEq = "geq"
	Plus = "plus"
	Minus = "minus"
	Mult = "mult"
	Div = "div"
	Assign = "assign"
	OpenPar = "openpar"
	ClosePar = "closepar"
	OpenCubr = "opencubr"
	CloseCubr = "closecubr"
	OpenSqbr = "opensqbr"
	CloseSqbr = "closesqbr"
	Semi = "semi"
	Comma = "comma"
	Dot = "dot"
	Colon = "colon"
	ReturnType = "returntype"
	ScopeOp = "scopeop"
	Or = "or"
	And = "and"
	Not = "not"
	Integer = "integer"
	Float = "float"
	Void = "void"
	Class = "class"
	SelfT = "self"
	IsA = "isa"
	While = "while"
	If = "if"
	Then = "then"
	Else = "else"
	Read = "read"
	Write = "write"
	Return = "return"
	LocalVar = "localvar"
	Constructor = "constructor"
	Attribute = "attribute"
	Function = "function"
	Public = "public"
	Private = "private"
	InlineCmt = "inlinecmt"
	BlockCmt = "blockcmt"


Payload = Optional[Union[str, int, float]]

# Data-bearing kinds carry an empty value so the literal matches the token representation.
_PLACEHOLDERS: Dict[TokenType, Payload] = {
	TokenType.Id: "",
	TokenType.IntNum: 0,
	TokenType.FloatNum: 0.0,
}


@dataclass(frozen=True)
class TerminalSymbol:
	kind: TokenType
	payload: Payload = None

	@classmethod
	def of(cls, kind: TokenType) -> "TerminalSymbol":
		return cls(kind, _PLACEHOLDERS.get(kind))

	@property
	def has_payload(self) -> bool:
		return self.kind in _PLACEHOLDERS


_RAW_NAMES: Dict[str, TokenType] = {
	"$": TokenType.EndOfFile,
	"eof": TokenType.EndOfFile,
	"id": TokenType.Id,
	"intlit": TokenType.IntNum,
	"intnum": TokenType.IntNum,
	"floatlit": TokenType.FloatNum,
	"floatnum": TokenType.FloatNum,
	"equal": TokenType.Assign,
	"eq": TokenType.Eq,
	"neq": TokenType.NotEq,
	"noteq": TokenType.NotEq,
	"lt": TokenType.Lt,
	"gt": TokenType.Gt,
	"leq": TokenType.LEq,
	"geq": TokenType.GEq,
	"plus": TokenType.Plus,
	"minus": TokenType.Minus,
	"mult": TokenType.Mult,
	"div": TokenType.Div,
	"assign": TokenType.Assign,
	"lpar": TokenType.OpenPar,
	"openpar": TokenType.OpenPar,
	"rpar": TokenType.ClosePar,
	"closepar": TokenType.ClosePar,
	"lcurbr": TokenType.OpenCubr,
	"opencubr": TokenType.OpenCubr,
	"rcurbr": TokenType.CloseCubr,
	"closecubr": TokenType.CloseCubr,
	"lsqbr": TokenType.OpenSqbr,
	"opensqbr": TokenType.OpenSqbr,
	"rsqbr": TokenType.CloseSqbr,
	"closesqbr": TokenType.CloseSqbr,
	"semi": TokenType.Semi,
	"comma": TokenType.Comma,
	"dot": TokenType.Dot,
	"colon": TokenType.Colon,
	"arrow": TokenType.ReturnType,
	"returntype": TokenType.ReturnType,
	"sr": TokenType.ScopeOp,
	"scopeop": TokenType.ScopeOp,
	"or": TokenType.Or,
	"and": TokenType.And,
	"not": TokenType.Not,
	"integer": TokenType.Integer,
	"float": TokenType.Float,
	"void": TokenType.Void,
	"class": TokenType.Class,
	"self": TokenType.SelfT,
	"isa": TokenType.IsA,
	"while": TokenType.While,
	"if": TokenType.If,
	"then": TokenType.Then,
	"else": TokenType.Else,
	"read": TokenType.Read,
	"write": TokenType.Write,
	"return": TokenType.Return,
	"localvar": TokenType.LocalVar,
	"constructor": TokenType.Constructor,
	"constructorkeyword": TokenType.Constructor,
	"attribute": TokenType.Attribute,
	"function": TokenType.Function,
	"public": TokenType.Public,
	"private": TokenType.Private,
	"inlinecmt": TokenType.InlineCmt,
	"blockcmt": TokenType.BlockCmt,
}

TERMINALS: Mapping[str, TerminalSymbol] = MappingProxyType(
	{name: TerminalSymbol.of(kind) for name, kind in _RAW_NAMES.items()}
)


def resolve(raw_name: str) -> TerminalSymbol:
	"""Map a raw lexical name (case-sensitive) to its canonical terminal."""
	try:
		return TERMINALS[raw_name]
	except KeyError:
		raise UnknownSymbol(raw_name) from None


def display_name(symbol: TerminalSymbol) -> str:
	return symbol.kind.value
