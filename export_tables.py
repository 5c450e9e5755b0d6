"""
Export transcribed FIRST/FOLLOW sets and LL(1) table entries into Excel-friendly files.

Outputs (for each document given):
  - FIRST.csv, FOLLOW.csv
  - ParseTable.csv
  - LL1_Tables.xlsx  (multiple sheets)

Run:
  python -X utf8 export_tables.py --first_follow first_follow.html --ll1_table ll1.html --out_dir out
"""

from __future__ import annotations

import sys
from pathlib import Path

from absl import app, flags, logging

from transcriber.errors import TranscriptionError
from transcriber.export import export_tables
from transcriber.first_follow import transcribe_first_follow
from transcriber.parse_table import transcribe_ll1_table

FLAGS = flags.FLAGS

flags.DEFINE_string("first_follow", None, "HTML document holding the FIRST/FOLLOW table.")
flags.DEFINE_string("ll1_table", None, "HTML document holding the LL(1) parse table.")
flags.DEFINE_string("out_dir", ".", "Directory receiving the exported files.")


def _read_document(path: str) -> str:
	"""Document text from `path`, or from stdin when `path` is empty or `-`."""
	if not path or path == "-":
		return sys.stdin.read()
	return Path(path).read_text(encoding="utf-8")


def main(unused_argv) -> int:
	if not FLAGS.first_follow and not FLAGS.ll1_table:
		raise app.UsageError("Pass --first_follow and/or --ll1_table.")

	try:
		first_follow = transcribe_first_follow(_read_document(FLAGS.first_follow)) if FLAGS.first_follow else None
		parse_table = transcribe_ll1_table(_read_document(FLAGS.ll1_table)) if FLAGS.ll1_table else None
	except TranscriptionError as e:
		logging.error("Export aborted: %s", e)
		return 1

	written = export_tables(Path(FLAGS.out_dir), first_follow=first_follow, parse_table=parse_table)
	print("Wrote:", ", ".join(p.name for p in written))
	return 0


if __name__ == "__main__":
	app.run(main)
