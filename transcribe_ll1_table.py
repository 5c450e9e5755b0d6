"""
Transcribe a rendered LL(1) parse table into Rust parsing-table entries.

Usage:
  python transcribe_ll1_table.py --document ll1_table.html > entries.txt
  python transcribe_ll1_table.py < ll1_table.html
"""

from __future__ import annotations

import sys
from pathlib import Path

from absl import app, flags, logging

from transcriber.emit import emit_parse_table
from transcriber.errors import TranscriptionError
from transcriber.parse_table import transcribe_ll1_table

FLAGS = flags.FLAGS

flags.DEFINE_string("document", "-", "HTML document holding the LL(1) parse table ('-' reads stdin).")


def _read_document(path: str) -> str:
	"""Document text from `path`, or from stdin when `path` is empty or `-`."""
	if not path or path == "-":
		return sys.stdin.read()
	return Path(path).read_text(encoding="utf-8")


def main(unused_argv) -> int:
	html = _read_document(FLAGS.document)
	try:
		text = emit_parse_table(transcribe_ll1_table(html))
	except TranscriptionError as e:
		logging.error("LL(1) table transcription aborted: %s", e)
		return 1
	print(text)
	return 0


if __name__ == "__main__":
	app.run(main)
