"""User-configurable settings for parsing and export."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParserSettings:
    """Limits applied while parsing notation."""

    max_variation_depth: int = 64


@dataclass(slots=True, frozen=True)
class ExportSettings:
    """Controls how a tree is written back to PGN."""

    line_width: int = 80
    include_comments: bool = True
    include_variations: bool = True
    include_nags: bool = True
