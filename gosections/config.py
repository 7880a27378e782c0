"""Formatter configuration and its YAML form."""

from __future__ import annotations

from dataclasses import dataclass, field

import yaml

from .section import (
    ALIAS_TYPE,
    BLANK_TYPE,
    CUSTOM_TYPE,
    DEFAULT_TYPE,
    DOT_TYPE,
    STANDARD_TYPE,
    Section,
    default_section_separators,
    default_sections,
    parse,
)

_DEFAULT_ORDER = {
    STANDARD_TYPE: 0,
    DEFAULT_TYPE: 1,
    CUSTOM_TYPE: 2,
    BLANK_TYPE: 3,
    DOT_TYPE: 4,
    ALIAS_TYPE: 5,
}

_BOOL_KEYS = {
    "no-inlineComments": "no_inline_comments",
    "no-prefixComments": "no_prefix_comments",
    "skipGenerated": "skip_generated",
    "skipVendor": "skip_vendor",
    "customOrder": "custom_order",
}


@dataclass
class BoolConfig:
    """On/off switches of the formatter."""

    no_inline_comments: bool = False
    no_prefix_comments: bool = False
    debug: bool = False
    skip_generated: bool = False
    skip_vendor: bool = False
    custom_order: bool = False


@dataclass
class Config(BoolConfig):
    """A complete, parsed formatter configuration."""

    sections: list[Section] = field(default_factory=default_sections)
    section_separators: list[Section] = field(default_factory=default_section_separators)


@dataclass
class YamlConfig:
    """Configuration as given by the user, with sections still as text."""

    cfg: BoolConfig = field(default_factory=BoolConfig)
    section_strings: list[str] | None = None
    section_separator_strings: list[str] | None = None

    def parse(self) -> Config:
        """Turn the section strings into sections and build a Config."""
        sections = parse(self.section_strings) or default_sections()
        if not self.cfg.custom_order:
            sections = sorted(
                sections,
                key=lambda s: (_DEFAULT_ORDER.get(s.section_type(), 0), s.section_type(), str(s)),
            )
        separators = parse(self.section_separator_strings) or default_section_separators()
        return Config(
            no_inline_comments=self.cfg.no_inline_comments,
            no_prefix_comments=self.cfg.no_prefix_comments,
            debug=self.cfg.debug,
            skip_generated=self.cfg.skip_generated,
            skip_vendor=self.cfg.skip_vendor,
            custom_order=self.cfg.custom_order,
            sections=list(sections),
            section_separators=list(separators),
        )


def _string_list(value: object, key: str) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list")
    return [str(item) for item in value]


def parse_config(text: str) -> Config:
    """Parse a YAML configuration document."""
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("configuration must be a mapping")
    bools = BoolConfig(**{attr: bool(data[key]) for key, attr in _BOOL_KEYS.items() if key in data})
    return YamlConfig(
        cfg=bools,
        section_strings=_string_list(data.get("sections"), "sections"),
        section_separator_strings=_string_list(data.get("sectionseparators"), "sectionseparators"),
    ).parse()