"""Finding and loading the files to format."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath
from typing import Callable

FileCheck = Callable[[str], bool]


class FileObj(ABC):
    """Something that has a path and can be loaded."""

    path: str

    @abstractmethod
    def load(self) -> bytes:
        """Return the content."""


@dataclass(frozen=True)
class File(FileObj):
    """A file on disk."""

    path: str

    def load(self) -> bytes:
        with open(self.path, "rb") as fh:
            return fh.read()


class StdInFile(FileObj):
    """Standard input, read as a single file."""

    path = "StdIn"

    def load(self) -> bytes:
        return sys.stdin.buffer.read()


FileGenerator = Callable[[], "list[FileObj]"]


def combine(*args: FileGenerator) -> FileGenerator:
    """Return a generator yielding the files of all ``args`` in order."""

    def generate() -> list[FileObj]:
        files: list[FileObj] = []
        for generator in args:
            files.extend(generator())
        return files

    return generate


def _ext(path: str) -> str:
    name = os.path.basename(path)
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def is_go_file(path: str) -> bool:
    """Return True if ``path`` names a Go source file."""
    return not os.path.isdir(path) and _ext(path) == ".go"


def is_outside_vendor_dir(path: str) -> bool:
    """Return True unless some component of ``path`` is ``vendor``."""
    return "vendor" not in PurePath(path).parts


def check_chains(*args: FileCheck) -> FileCheck:
    """Return a check passing only when every check in ``args`` passes."""

    def check(path: str) -> bool:
        return all(fn(path) for fn in args)

    return check


def _walk(directory: str, check: FileCheck) -> list[str]:
    found: list[str] = []
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            found.extend(_walk(entry.path, check))
        elif check(entry.path):
            found.append(os.path.normpath(entry.path))
    return found


def find_files_for_path(path: str, check: FileCheck) -> list[str]:
    """Return the files at ``path`` (walked if a directory) that pass ``check``."""
    os.stat(path)
    if os.path.isdir(path):
        return _walk(path, check)
    if check(path):
        return [os.path.normpath(path)]
    return []


def files_in_paths(paths: list[str], check: FileCheck) -> FileGenerator:
    """Return a generator of the files under ``paths`` passing ``check``."""

    def generate() -> list[FileObj]:
        return [File(found) for path in paths for found in find_files_for_path(path, check)]

    return generate


def go_files_in_paths(paths: list[str], skip_vendor: bool) -> FileGenerator:
    """Return a generator of the Go files under ``paths``."""
    check = check_chains(is_go_file, is_outside_vendor_dir) if skip_vendor else is_go_file
    return files_in_paths(paths, check)


def stdin_files() -> list[FileObj]:
    """Return standard input as a file when it is not a terminal."""
    if sys.stdin is None or sys.stdin.isatty():
        return []
    return [StdInFile()]