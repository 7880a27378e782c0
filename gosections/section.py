"""Import sections, their matching rules and the section list parser."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable

from .specificity import (
    Default as DefaultSpecificity,
    Match,
    MatchSpecificity,
    MisMatch,
    NameMatch,
    StandardMatch,
)

INDENT = "\t"
LINEBREAK = "\n"
WIN_LINEBREAK = "\r"
COLON = ":"
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"

STANDARD_TYPE = "standard"
DEFAULT_TYPE = "default"
CUSTOM_TYPE = "custom"
BLANK_TYPE = "blank"
DOT_TYPE = "dot"
ALIAS_TYPE = "alias"
NEWLINE_TYPE = "newline"
COMMENTLINE_TYPE = "commentline"

CUSTOM_SEPARATOR = ","

_STANDARD_PACKAGES = frozenset(
    """
    archive/tar archive/zip arena bufio bytes cmp compress/bzip2 compress/flate
    compress/gzip compress/lzw compress/zlib container/heap container/list
    container/ring context crypto crypto/aes crypto/cipher crypto/des crypto/dsa
    crypto/ecdh crypto/ecdsa crypto/ed25519 crypto/elliptic crypto/hmac
    crypto/md5 crypto/rand crypto/rc4 crypto/rsa crypto/sha1 crypto/sha256
    crypto/sha512 crypto/subtle crypto/tls crypto/x509 crypto/x509/pkix
    database/sql database/sql/driver debug/buildinfo debug/dwarf debug/elf
    debug/gosym debug/macho debug/pe debug/plan9obj embed encoding
    encoding/ascii85 encoding/asn1 encoding/base32 encoding/base64
    encoding/binary encoding/csv encoding/gob encoding/hex encoding/json
    encoding/pem encoding/xml errors expvar flag fmt go/ast go/build
    go/build/constraint go/constant go/doc go/doc/comment go/format go/importer
    go/parser go/printer go/scanner go/token go/types hash hash/adler32
    hash/crc32 hash/crc64 hash/fnv hash/maphash html html/template image
    image/color image/color/palette image/draw image/gif image/jpeg image/png
    index/suffixarray io io/fs io/ioutil log log/slog log/syslog maps math
    math/big math/bits math/cmplx math/rand mime mime/multipart
    mime/quotedprintable net net/http net/http/cgi net/http/cookiejar
    net/http/fcgi net/http/httptest net/http/httptrace net/http/httputil
    net/http/pprof net/mail net/netip net/rpc net/rpc/jsonrpc net/smtp
    net/textproto net/url os os/exec os/signal os/user path path/filepath plugin
    reflect regexp regexp/syntax runtime runtime/cgo runtime/coverage
    runtime/debug runtime/metrics runtime/pprof runtime/race runtime/trace
    slices sort strconv strings sync sync/atomic syscall testing testing/fstest
    testing/iotest testing/quick testing/slogtest text/scanner text/tabwriter
    text/template text/template/parse time time/tzdata unicode unicode/utf16
    unicode/utf8 unsafe
    """.split()
)


def is_standard(pkg: str) -> bool:
    """Return True if ``pkg`` is a Go standard library package path."""
    return pkg in _STANDARD_PACKAGES


class Section(ABC):
    """A part of the formatted import block.

    ``spec`` arguments are import records exposing ``path`` and ``name``.
    """

    _type: ClassVar[str] = ""

    @abstractmethod
    def match_specificity(self, spec: Any) -> MatchSpecificity:
        """Return how well the import ``spec`` matches this section."""

    def section_type(self) -> str:
        """Return the kind of this section."""
        return self._type

    def __str__(self) -> str:
        return self._type


@dataclass(frozen=True)
class Standard(Section):
    """Imports from the Go standard library."""

    _type: ClassVar[str] = STANDARD_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return StandardMatch() if is_standard(spec.path) else MisMatch()

    __str__ = Section.__str__


@dataclass(frozen=True)
class Default(Section):
    """Every import not claimed by a more specific section."""

    _type: ClassVar[str] = DEFAULT_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return DefaultSpecificity()

    __str__ = Section.__str__


@dataclass(frozen=True)
class Custom(Section):
    """Imports whose path starts with one of comma separated prefixes."""

    prefix: str = ""

    _type: ClassVar[str] = CUSTOM_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        for prefix in self.prefix.split(CUSTOM_SEPARATOR):
            prefix = prefix.strip()
            if spec.path.startswith(prefix):
                return Match(len(prefix))
        return MisMatch()

    def __str__(self) -> str:
        return f"prefix({self.prefix})"


@dataclass(frozen=True)
class CommentLine(Section):
    """A comment line; it never holds imports."""

    comment: str = ""

    _type: ClassVar[str] = COMMENTLINE_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return MisMatch()

    def __str__(self) -> str:
        return f"commentline({self.comment})"


@dataclass(frozen=True)
class NewLine(Section):
    """An empty line between sections; it never holds imports."""

    _type: ClassVar[str] = NEWLINE_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return MisMatch()

    __str__ = Section.__str__


@dataclass(frozen=True)
class Dot(Section):
    """Dot imports."""

    _type: ClassVar[str] = DOT_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return NameMatch() if spec.name == "." else MisMatch()

    __str__ = Section.__str__


@dataclass(frozen=True)
class Blank(Section):
    """Blank (underscore) imports."""

    _type: ClassVar[str] = BLANK_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        return NameMatch() if spec.name == "_" else MisMatch()

    __str__ = Section.__str__


@dataclass(frozen=True)
class Alias(Section):
    """Imports given an explicit alias other than dot or blank."""

    _type: ClassVar[str] = ALIAS_TYPE

    def match_specificity(self, spec: Any) -> MatchSpecificity:
        if spec.name not in (".", "_", ""):
            return NameMatch()
        return MisMatch()

    __str__ = Section.__str__


def section_strings(sections: Iterable[Section]) -> list[str]:
    """Return the string form of every section."""
    return [str(s) for s in sections]


def default_sections() -> list[Section]:
    """Return the sections used when none are configured."""
    return [Standard(), Default()]


def default_section_separators() -> list[Section]:
    """Return the separators used when none are configured."""
    return [NewLine()]


class SectionParsingError(ValueError):
    """A section description could not be parsed."""

    def __init__(self, error: BaseException | None = None, message: str | None = None):
        if message is None:
            message = str(error) if error is not None else ""
        super().__init__(message)
        self.error = error
        self.__cause__ = error

    def wrap(self, section_str: str) -> SectionParsingError:
        """Return an error naming the section text that failed."""
        return SectionParsingError(
            self, f'failed to parse section "{section_str}": {self}'
        )


class MissingParameterClosingBracketsError(ValueError):
    def __init__(self, message: str = f"section parameter is missing closing '{RIGHT_PARENTHESIS}'"):
        super().__init__(message)


class MoreThanOneOpeningQuotesError(ValueError):
    def __init__(self, message: str = f"found more than one '{RIGHT_PARENTHESIS}' parameter start sequences"):
        super().__init__(message)


class SectionTypeDoesNotAcceptParametersError(ValueError):
    def __init__(self, message: str = "section type does not accept a parameter"):
        super().__init__(message)


class SectionTypeDoesNotAcceptPrefixError(ValueError):
    def __init__(self, message: str = "section may not contain a Prefix"):
        super().__init__(message)


class SectionTypeDoesNotAcceptSuffixError(ValueError):
    def __init__(self, message: str = "section may not contain a Suffix"):
        super().__init__(message)


class InvalidSectionParamsError(ValueError):
    """One or more section strings were not recognised."""


class EqualSpecificityMatchError(ValueError):
    def __init__(self, imports: Any, section_a: Section, section_b: Section):
        super().__init__(f"Import {imports} matched section {section_a} and {section_b} equally")
        self.imports = imports
        self.section_a = section_a
        self.section_b = section_b


class NoMatchingSectionForImportError(ValueError):
    def __init__(self, imports: Any):
        super().__init__(f"No section found for Import: {imports}")
        self.imports = imports


def _segments_text(segments: Iterable[str]) -> str:
    return "[" + " ".join(segments) + "]"


class InvalidImportSplitError(ValueError):
    def __init__(self, segments: list[str]):
        super().__init__(
            "separating the inline comment from the import yielded an invalid "
            f"number of segments: {_segments_text(segments)}"
        )
        self.segments = list(segments)


class InvalidAliasSplitError(ValueError):
    def __init__(self, segments: list[str]):
        super().__init__(
            "separating the alias from the path yielded an invalid number of "
            f"segments: {_segments_text(segments)}"
        )
        self.segments = list(segments)


class FileParsingError(ValueError):
    """A source file could not be parsed."""

    def __init__(self, error: BaseException | str | None = None):
        super().__init__(str(error) if error is not None else "")
        self.error = error
        if isinstance(error, BaseException):
            self.__cause__ = error


_SIMPLE_SECTIONS: dict[str, type[Section]] = {
    "default": Default,
    "standard": Standard,
    "newline": NewLine,
    "dot": Dot,
    "blank": Blank,
    "alias": Alias,
}


def parse(data: list[str] | None) -> list[Section] | None:
    """Parse section descriptions; return None when none are given.

    An empty string anywhere in ``data`` also yields None. Unknown
    descriptions raise :class:`InvalidSectionParamsError`.
    """
    if not data:
        return None

    sections: list[Section] = []
    invalid: list[str] = []
    for item in data:
        lowered = item.lower()
        if not lowered:
            return None
        if lowered in _SIMPLE_SECTIONS:
            sections.append(_SIMPLE_SECTIONS[lowered]())
        elif lowered.startswith("prefix(") and len(item) > 8:
            sections.append(Custom(item[7:-1]))
        elif lowered.startswith("commentline(") and len(item) > 13:
            sections.append(Custom(item[12:-1]))
        else:
            invalid.append(lowered)

    if invalid:
        raise InvalidSectionParamsError(
            "invalid params:" + "".join(f" {s}" for s in invalid)
        )
    return sections