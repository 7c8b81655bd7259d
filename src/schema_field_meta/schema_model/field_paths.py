"""Field path parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INDEX_SEGMENT = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class NameSegment:
    """Object property segment."""

    name: str


@dataclass(frozen=True)
class IndexSegment:
    """Array position segment."""

    position: int


PathSegment = NameSegment | IndexSegment
FieldPath = tuple[PathSegment, ...]


def parse_field_path(path: str) -> FieldPath:
    """Split a dot-delimited field address into segments.

    All-digit segments always become index segments, so an object property
    whose name is made only of digits cannot be addressed. The empty string
    parses to the empty path, which addresses the root node.
    """
    if not path:
        return ()
    return tuple(_parse_segment(part) for part in path.split("."))


def format_field_path(segments: FieldPath) -> str:
    """Join segments back into the dot-delimited form."""
    return ".".join(
        str(segment.position) if isinstance(segment, IndexSegment) else segment.name
        for segment in segments
    )


def _parse_segment(part: str) -> PathSegment:
    if _INDEX_SEGMENT.fullmatch(part):
        return IndexSegment(position=int(part))
    return NameSegment(name=part)
