"""Assigning imports to the sections they match best."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .config import Config
from .logger import get_logger
from .parse import GciImport
from .section import NoMatchingSectionForImportError, Section
from .specificity import MatchSpecificity, MisMatch


@dataclass(frozen=True)
class Block:
    """A span of source text belonging to one import."""

    start: int
    end: int


def format_imports(data: Iterable[GciImport], cfg: Config) -> dict[str, list[Block]]:
    """Group imports by the string of the section that matches them best.

    An import matched equally well by two sections yields an empty result.
    """
    result: dict[str, list[Block]] = {}
    mismatch = MisMatch()
    for imp in data:
        best: Section | None = None
        best_spec: MatchSpecificity = mismatch
        for section in cfg.sections:
            spec = section.match_specificity(imp)
            if spec.is_more_specific(mismatch) and spec.equal(best_spec):
                return {}
            if spec.is_more_specific(best_spec):
                best_spec = spec
                best = section
        if best is None:
            raise NoMatchingSectionForImportError(imp)
        get_logger().debug(f"Matched import {imp} to section {best}")
        result.setdefault(str(best), []).append(Block(imp.start, imp.end))
    return result