"""
Transcribe a rendered FIRST/FOLLOW table into Rust `HashMap` literals.

Usage:
  python transcribe_first_follow.py --document first_follow.html > sets.txt
  python transcribe_first_follow.py < first_follow.html
"""

from __future__ import annotations

import sys
from pathlib import Path

from absl import app, flags, logging

from transcriber.emit import emit_first_follow
from transcriber.errors import TranscriptionError
from transcriber.first_follow import transcribe_first_follow

FLAGS = flags.FLAGS

flags.DEFINE_string("document", "-", "HTML document holding the FIRST/FOLLOW table ('-' reads stdin).")


def _read_document(path: str) -> str:
	"""Document text from `path`, or from stdin when `path` is empty or `-`."""
	if not path or path == "-":
		return sys.stdin.read()
	return Path(path).read_text(encoding="utf-8")


def main(unused_argv) -> int:
	html = _read_document(FLAGS.document)
	try:
		text = emit_first_follow(transcribe_first_follow(html))
	except TranscriptionError as e:
		logging.error("FIRST/FOLLOW transcription aborted: %s", e)
		return 1
	print(text)
	return 0


if __name__ == "__main__":
	app.run(main)
