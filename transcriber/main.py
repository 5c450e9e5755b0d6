from __future__ import annotations

from typing import Any, Dict, List

from absl import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from transcriber.emit import emit_first_follow, emit_parse_table
from transcriber.errors import TranscriptionError
from transcriber.first_follow import transcribe_first_follow
from transcriber.parse_table import Action, NonTerminal, SymbolRef, Terminal, transcribe_ll1_table
from transcriber.symbols import display_name


app = FastAPI(title="LL(1) Table Transcriber", version="1.0.0")

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)


class TranscribeRequest(BaseModel):
	# Rendered HTML page holding exactly one grammar table
	document: str


@app.exception_handler(TranscriptionError)
def transcription_error(request: Request, exc: TranscriptionError) -> JSONResponse:
	logging.error("Transcription of %s aborted: %s", request.url.path, exc)
	return JSONResponse(
		status_code=422,
		content={
			"error": type(exc).__name__,
			"message": exc.message,
			"context": {k: str(v) for k, v in exc.context.items()},
		},
	)


def _ref_to_json(ref: SymbolRef) -> Dict[str, str]:
	if isinstance(ref, Terminal):
		return {"kind": "term", "value": display_name(ref.symbol)}
	if isinstance(ref, NonTerminal):
		return {"kind": "nonterm", "value": ref.name}
	if isinstance(ref, Action):
		return {"kind": ref.kind, "value": ref.name}
	raise TypeError(f"Not a symbol reference: {ref!r}")


@app.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
	return HTMLResponse(
		"<h2>LL(1) Table Transcriber API</h2>"
		"<p>POST <code>/api/first-follow</code> or <code>/api/ll1-table</code> with JSON: "
		"<code>{\"document\": \"&lt;html&gt;...\"}</code></p>"
	)


@app.get("/health")
def health() -> Dict[str, str]:
	return {"status": "ok"}


@app.post("/api/first-follow")
def first_follow(req: TranscribeRequest) -> Dict[str, Any]:
	table = transcribe_first_follow(req.document)
	entries: List[Dict[str, Any]] = [
		{
			"nonterminal": nt,
			"first": [display_name(s) for s in entry.first],
			"follow": [display_name(s) for s in entry.follow],
		}
		for nt, entry in table.items()
	]
	return {"text": emit_first_follow(table), "entries": entries}


@app.post("/api/ll1-table")
def ll1_table(req: TranscribeRequest) -> Dict[str, Any]:
	table = transcribe_ll1_table(req.document)
	entries: List[Dict[str, Any]] = [
		{
			"nonterminal": nt,
			"terminal": display_name(terminal),
			"body": [_ref_to_json(ref) for ref in body],
		}
		for (nt, terminal), body in table.items()
	]
	return {"text": emit_parse_table(table), "entries": entries}


if __name__ == "__main__":
	import uvicorn

	uvicorn.run(app, host="127.0.0.1", port=8000)
