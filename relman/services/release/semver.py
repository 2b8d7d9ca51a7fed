from __future__ import annotations

import re
from dataclasses import dataclass


_VERSION_RE = re.compile(r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)$")
_COMPONENT_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True, slots=True, order=True)
class Version:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def tag(self) -> str:
        return f"v{self}"


def parse_version(text: str) -> Version | None:
    """Parse a strict ``X.Y.Z`` version (no prefix, no leading zeros)."""
    m = _VERSION_RE.match(text)
    if m is None:
        return None
    return Version(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def parse_tag_lenient(tag: str) -> Version:
    """Parse an existing tag such as ``v1.2.3`` or ``1.4``.

    Missing or non-numeric components count as zero, so any tag name
    yields a comparable version.
    """
    text = tag.strip()
    if text[:1] in {"v", "V"}:
        text = text[1:]

    parts = text.split(".")
    components: list[int] = []
    for i in range(3):
        raw = parts[i] if i < len(parts) else ""
        components.append(int(raw) if _COMPONENT_RE.match(raw) else 0)
    return Version(components[0], components[1], components[2])


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 comparing major, then minor, then patch."""
    for left, right in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if left > right:
            return 1
        if left < right:
            return -1
    return 0
