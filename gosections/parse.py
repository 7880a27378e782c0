"""Locating the import declarations of a Go source file.

Offsets returned here index into the source text (decoded as UTF-8 when
bytes are given). Every ``end`` and ``tail_start`` points one character
past the closing token, so a slice up to it also takes the line break.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field

C_PATH = '"C"'

_GENERATED_MARKERS = (
    "code generated",
    "do not edit",
    "autogenerated file",
    "automatically generated",
)

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>[ \t\r\n\ufeff]+)
  | (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<string>"(?:[^"\\\n]|\\[^\n])*"|`[^`]*`)
  | (?P<char>'(?:[^'\\\n]|\\[^\n])+')
  | (?P<number>\.?\d(?:[eEpP][+-]|[\w.])*)
  | (?P<ident>[^\W\d]\w*)
  | (?P<op>[^\s"'`])
    """,
    re.VERBOSE | re.DOTALL,
)

_OPENERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class GciImport:
    """One import spec with its doc and trailing comment."""

    start: int
    end: int
    name: str
    path: str


@dataclass
class ParsedFile:
    """Imports and the boundaries of the import region of a file."""

    imports: list[GciImport] = field(default_factory=list)
    head_end: int = 0
    tail_start: int = 0
    c_start: int = 0
    c_end: int = 0


class NoImportError(LookupError):
    """The file has no import declarations."""

    def __init__(self) -> None:
        super().__init__("No imports")


class GoSyntaxError(ValueError):
    """The Go source could not be parsed."""

    def __init__(self, filename: str, line: int, message: str) -> None:
        super().__init__(f"{filename}:{line}: {message}")
        self.filename = filename
        self.line = line


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    start: int
    end: int
    line: int
    end_line: int


@dataclass
class _Spec:
    doc: list[_Token] | None
    name: _Token | None
    path: _Token
    comment: list[_Token] | None


@dataclass
class _Decl:
    pos: int
    end: int
    doc: list[_Token] | None
    specs: list[_Spec]


def _tokenize(text: str, filename: str) -> list[_Token]:
    newlines = [m.start() for m in re.finditer("\n", text)]

    def line_of(offset: int) -> int:
        return bisect.bisect_right(newlines, offset - 1) + 1

    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None or (match.lastgroup == "op" and text.startswith("/*", pos)):
            raise GoSyntaxError(filename, line_of(pos), "unterminated literal or comment")
        kind = match.lastgroup
        value = match.group()
        if kind != "ws":
            line = line_of(pos)
            tokens.append(_Token(kind, value, pos, match.end(), line, line + value.count("\n")))
        pos = match.end()
    eof_line = line_of(len(text))
    tokens.append(_Token("eof", "", len(text), len(text), eof_line, eof_line))
    return tokens


class _Parser:
    def __init__(self, tokens: list[_Token], filename: str) -> None:
        self._tokens = tokens
        self._index = 0
        self._filename = filename
        self.tok: _Token | None = None
        self.prev: _Token | None = None
        self.lead: list[_Token] | None = None
        self.line_comment: list[_Token] | None = None
        self.next()

    @property
    def remaining(self) -> list[_Token]:
        return self._tokens[self._index - 1:]

    def _raw(self) -> None:
        self.tok = self._tokens[self._index]
        if self._index < len(self._tokens) - 1:
            self._index += 1

    def _group(self, n: int) -> tuple[list[_Token], int]:
        comments: list[_Token] = []
        endline = self.tok.line
        while self.tok.kind == "comment" and self.tok.line <= endline + n:
            comments.append(self.tok)
            endline = self.tok.end_line
            self._raw()
        return comments, endline

    def next(self) -> None:
        prev = self.tok
        self.prev = prev
        self.lead = None
        self.line_comment = None
        self._raw()
        if self.tok.kind != "comment":
            return
        if prev is not None and self.tok.line == prev.end_line:
            group, endline = self._group(0)
            if self.tok.line != endline or self.tok.text == ";" or self.tok.kind == "eof":
                self.line_comment = group
        group = None
        endline = -1
        while self.tok.kind == "comment":
            group, endline = self._group(1)
        if endline + 1 == self.tok.line:
            self.lead = group

    def error(self, message: str) -> GoSyntaxError:
        return GoSyntaxError(self._filename, self.tok.line, message)

    def expect(self, text: str) -> _Token:
        tok = self.tok
        if tok.text != text or tok.kind in ("string", "char", "comment"):
            raise self.error(f"expected '{text}', found '{tok.text or 'EOF'}'")
        self.next()
        return tok

    def expect_semi(self) -> list[_Token] | None:
        """Consume a statement end; return the line comment that follows it."""
        comment = self.line_comment
        if self.tok.text in (")", "}"):
            return comment
        if self.tok.text == ";":
            self.next()
            return self.line_comment
        if self.tok.kind == "eof" or self.tok.line > self.prev.end_line:
            return comment
        raise self.error(f"expected ';', found '{self.tok.text}'")

    def parse_spec(self, doc: list[_Token] | None) -> _Spec:
        name = None
        if self.tok.kind == "ident" or self.tok.text == ".":
            name = self.tok
            self.next()
        if self.tok.kind != "string":
            raise self.error("expected import path")
        path = self.tok
        self.next()
        comment = self.expect_semi()
        return _Spec(doc, name, path, comment)

    def parse_import_decl(self) -> _Decl:
        doc = self.lead
        keyword = self.tok
        self.next()
        if self.tok.text == "(":
            self.next()
            specs = []
            while self.tok.text != ")" and self.tok.kind != "eof":
                specs.append(self.parse_spec(self.lead))
            rparen = self.expect(")")
            self.expect_semi()
            return _Decl(keyword.start, rparen.end + 1, doc, specs)
        spec = self.parse_spec(self.lead)
        return _Decl(keyword.start, spec.path.end + 1, doc, [spec])


def _is_keyword(tok: _Token, word: str) -> bool:
    return tok.kind == "ident" and tok.text == word


def _check_rest(tokens: list[_Token], filename: str) -> None:
    stack: list[str] = []
    for tok in tokens:
        if tok.kind == "ident" and tok.text == "import":
            raise GoSyntaxError(filename, tok.line, "imports must appear before other declarations")
        if tok.kind != "op":
            continue
        if tok.text in _OPENERS:
            stack.append(_OPENERS[tok.text])
        elif tok.text in (")", "]", "}"):
            if not stack or stack.pop() != tok.text:
                raise GoSyntaxError(filename, tok.line, f"unexpected '{tok.text}'")
    if stack:
        raise GoSyntaxError(filename, tokens[-1].line, f"expected '{stack[-1]}', found 'EOF'")


def parse_file(src: str | bytes, filename: str = "") -> ParsedFile:
    """Parse ``src`` and return its imports, sorted by path then name.

    Raises :class:`NoImportError` if there are no imports and
    :class:`GoSyntaxError` if the source is malformed.
    """
    text = src.decode("utf-8") if isinstance(src, bytes) else src
    parser = _Parser(_tokenize(text, filename), filename)

    if not _is_keyword(parser.tok, "package"):
        raise parser.error(f"expected 'package', found '{parser.tok.text or 'EOF'}'")
    parser.next()
    if parser.tok.kind != "ident":
        raise parser.error("expected package name")
    parser.next()
    parser.expect_semi()

    decls: list[_Decl] = []
    while _is_keyword(parser.tok, "import"):
        decls.append(parser.parse_import_decl())
    _check_rest(parser.remaining, filename)
    if not decls:
        raise NoImportError()

    result = ParsedFile()
    for index, decl in enumerate(decls):
        if result.head_end == 0:
            result.head_end = decl.pos
        result.tail_start = decl.end
        for spec in decl.specs:
            if spec.path.text == C_PATH:
                if decl.doc:
                    result.c_start = decl.doc[0].start
                    if index == 0:
                        result.head_end = result.c_start
                else:
                    result.c_start = decl.pos
                result.c_end = decl.end
                continue
            if spec.doc:
                start = spec.doc[0].start
            elif spec.name is not None:
                start = spec.name.start
            else:
                start = spec.path.start
            end = spec.comment[-1].end + 1 if spec.comment else spec.path.end + 1
            result.imports.append(
                GciImport(
                    start=start,
                    end=end,
                    name=spec.name.text if spec.name is not None else "",
                    path=spec.path.text.strip('"'),
                )
            )

    result.imports.sort(key=lambda imp: (imp.path, imp.name))
    return result


def is_generated_file_by_comment(text: str) -> bool:
    """Report whether ``text`` looks like generated code."""
    lowered = text.lower()
    return any(marker in lowered for marker in _GENERATED_MARKERS)