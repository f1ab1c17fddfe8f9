"""Minimal LSP server for StoneScript: diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from stonescript import __version__
from stonescript.pipeline import analyze

server = LanguageServer(
    "stonescript-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the front end over the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    result = analyze(doc.source)
    diagnostics: list[Diagnostic] = []

    if result.lex_error is not None:
        exc = result.lex_error
        line = exc.row - 1
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=exc.column),
                    end=Position(line=line, character=exc.column + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="stonescript",
            )
        )
    elif result.parse_error is not None:
        exc = result.parse_error
        if exc.token is not None:
            pos = exc.token.position
            start = Position(line=pos.row - 1, character=pos.column)
            end = Position(line=pos.row - 1, character=pos.column + pos.length)
        else:
            start = end = Position(line=0, character=0)
        diagnostics.append(
            Diagnostic(
                range=Range(start=start, end=end),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="stonescript",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
