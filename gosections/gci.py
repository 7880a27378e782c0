"""Formatting the import blocks of Go source files."""

from __future__ import annotations

import difflib
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from .config import Config
from .files import FileGenerator, FileObj, combine, go_files_in_paths, stdin_files
from .format import format_imports
from .logger import get_logger, init_logger
from .parse import NoImportError, is_generated_file_by_comment, parse_file
from .section import INDENT, LINEBREAK, RIGHT_PARENTHESIS, Section, default_sections

FileFunc = Callable[[str, bytes, bytes], None]

_SPEC_RE = re.compile(r'^(?:([\w.]+)\s*)?("(?:[^"\\\n]|\\.)*"|`[^`]*`)\s*(.*)$')


def local_flags_to_sections(local_flags: list[str]) -> list[Section]:
    """Return the sections used for the legacy ``--local`` flags."""
    return default_sections()


def print_formatted_files(paths: list[str], cfg: Config) -> None:
    """Print the formatted content of standard input and the Go files in ``paths``."""

    def emit(path: str, unmodified: bytes, formatted: bytes) -> None:
        print(formatted.decode("utf-8"), end="")

    _process_stdin_and_paths(paths, cfg, emit)


def write_formatted_files(paths: list[str], cfg: Config) -> None:
    """Rewrite every Go file in ``paths`` that is not formatted."""

    def write(path: str, unmodified: bytes, formatted: bytes) -> None:
        if unmodified == formatted:
            get_logger().debug(f"Skipping correctly formatted File: {path}")
            return
        get_logger().info(f"Writing formatted File: {path}")
        with open(path, "wb") as fh:
            fh.write(formatted)

    process_files(go_files_in_paths(paths, cfg.skip_vendor), cfg, write)


def list_unformatted_files(paths: list[str], cfg: Config) -> None:
    """Print the path of every Go file in ``paths`` that is not formatted."""

    def report(path: str, unmodified: bytes, formatted: bytes) -> None:
        if unmodified != formatted:
            print(path)

    process_files(go_files_in_paths(paths, cfg.skip_vendor), cfg, report)


def _unified_diff(path: str, unmodified: bytes, formatted: bytes) -> str:
    return "".join(
        difflib.unified_diff(
            unmodified.decode("utf-8").splitlines(keepends=True),
            formatted.decode("utf-8").splitlines(keepends=True),
            fromfile=path,
            tofile=path,
        )
    )


def diff_formatted_files(paths: list[str], cfg: Config) -> None:
    """Print a unified diff of the changes formatting would make."""

    def emit(path: str, unmodified: bytes, formatted: bytes) -> None:
        print(_unified_diff(path, unmodified, formatted), end="")

    _process_stdin_and_paths(paths, cfg, emit)


def diff_formatted_files_to_list(paths: list[str], cfg: Config) -> list[str]:
    """Return one unified diff per processed file."""
    init_logger()
    diffs: list[str] = []

    def collect(path: str, unmodified: bytes, formatted: bytes) -> None:
        diffs.append(_unified_diff(path, unmodified, formatted))

    _process_stdin_and_paths(paths, cfg, collect)
    return diffs


def _process_stdin_and_paths(paths: list[str], cfg: Config, file_func: FileFunc) -> None:
    process_files(combine(stdin_files, go_files_in_paths(paths, cfg.skip_vendor)), cfg, file_func)


def process_files(file_generator: FileGenerator, cfg: Config, file_func: FileFunc) -> None:
    """Format all generated files in parallel and hand each result to ``file_func``.

    Results are handed over in the generator's order; the first error is raised.
    """
    files = file_generator()
    with ThreadPoolExecutor() as pool:
        futures = [pool.submit(load_format_go_file, f, cfg) for f in files]
    for file, future in zip(files, futures):
        unmodified, formatted = future.result()
        file_func(file.path, unmodified, formatted)


def load_format_go_file(file: FileObj, cfg: Config) -> tuple[bytes, bytes]:
    """Load ``file`` and return its original and formatted content."""
    src = file.load()
    get_logger().debug(f"Loaded File: {file.path}")
    return load_format(src, file.path, cfg)


def _unix(text: str) -> str:
    return text.replace("\r\n", LINEBREAK).replace("\r", LINEBREAK)


def _normalize_head(head: str) -> str:
    stripped = head.rstrip(" \t\n")
    if not stripped:
        return ""
    newlines = head[len(stripped):].count(LINEBREAK)
    last = stripped.rsplit(LINEBREAK, 1)[-1].strip()
    if last.startswith("//") or last.endswith("*/"):
        return stripped + LINEBREAK * min(max(newlines, 1), 2)
    return stripped + LINEBREAK * 2


def _normalize_tail(tail: str) -> str:
    rest = tail.lstrip(" \t\n")
    return LINEBREAK + rest if rest else ""


def _normalize_body(body: str) -> str:
    entries: list[tuple[str, str, str]] = []
    in_block = False
    for line in body.split(LINEBREAK)[:-1]:
        if in_block:
            entries.append(("raw", line, ""))
            in_block = "*/" not in line
            continue
        stripped = line.strip()
        if not stripped:
            entries.append(("blank", "", ""))
        elif stripped.startswith("//"):
            entries.append(("comment", stripped, ""))
        elif stripped.startswith("/*"):
            entries.append(("comment", stripped, ""))
            in_block = "*/" not in stripped[2:]
        else:
            match = _SPEC_RE.match(stripped)
            if match is None:
                entries.append(("comment", stripped, ""))
                continue
            name, path, comment = match.groups()
            code = f"{name} {path}" if name else path
            entries.append(("spec", code, comment.strip()))

    lines: list[str] = []
    run: list[tuple[str, str]] = []

    def flush() -> None:
        if run:
            width = max(len(code) for code, _ in run)
            lines.extend(
                f"{INDENT}{code}{' ' * (width - len(code) + 1)}{comment}" for code, comment in run
            )
            run.clear()

    for kind, text, comment in entries:
        if kind == "spec" and comment:
            run.append((text, comment))
            continue
        flush()
        if kind == "blank":
            lines.append("")
        elif kind == "raw":
            lines.append(text)
        else:
            lines.append(INDENT + text)
    flush()
    return "".join(line + LINEBREAK for line in lines)


def load_format(data: bytes | str, path: str, cfg: Config) -> tuple:
    """Return ``(original, formatted)``, of the same type as ``data``.

    Raises the parser's errors for malformed sources.
    """
    is_bytes = isinstance(data, (bytes, bytearray))
    src = bytes(data).decode("utf-8") if is_bytes else data

    def result(dist: str) -> tuple:
        return (src.encode("utf-8"), dist.encode("utf-8")) if is_bytes else (src, dist)

    if cfg.skip_generated and is_generated_file_by_comment(src):
        return result(src)
    try:
        parsed = parse_file(src, path)
    except NoImportError:
        return result(src)
    if len(parsed.imports) <= 1:
        return result(src)

    grouped = format_imports(parsed.imports, cfg)
    by_span = {(imp.start, imp.end): imp for imp in parsed.imports}

    groups: list[str] = []
    for section in cfg.sections:
        blocks = grouped.get(str(section))
        if not blocks:
            continue
        texts: list[str] = []
        previous = None
        for block in blocks:
            imp = by_span[(block.start, block.end)]
            key = (imp.name, imp.path)
            if key == previous:
                continue
            previous = key
            text = src[block.start:block.end]
            texts.append(text if text.endswith(LINEBREAK) else text + LINEBREAK)
        groups.append("".join(texts))
    body = _normalize_body(_unix(LINEBREAK.join(groups)))

    head = _normalize_head(_unix(src[:parsed.head_end]))
    if parsed.c_start != 0:
        head += _unix(src[parsed.c_start:parsed.c_end]) + LINEBREAK
    head += "import (" + LINEBREAK
    body += RIGHT_PARENTHESIS + LINEBREAK
    tail = _normalize_tail(_unix(src[parsed.tail_start:]))

    logger = get_logger()
    logger.debug(f"head:\n{head}")
    logger.debug(f"body:\n{body}")
    logger.debug(f"tail:\n{tail[:20]}")

    dist = head + body + tail
    logger.debug(f"raw:\n{dist}")
    parse_file(dist, path)
    return result(dist)