"""Reader for skin layout.ini files.

A layout file has:

- a ``[layout]`` section whose ``background`` key names the background image;
- one section per image resource, with ``file``, ``width``, ``height`` and
  ``frames`` keys;
- one section per parameter, with ``type`` (button, knob or popup),
  ``resource`` (the name of a resource section), ``pos_x`` and ``pos_y``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)

Sections = dict[str, dict[str, str]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Read a leading integer, ignoring trailing characters."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_ini(text: str) -> Sections:
    """Split INI text into sections of raw key/value strings.

    Keys and values are kept exactly as written; entries before the first
    section header belong to the section named "".
    """
    sections: Sections = {}
    name = ""
    for line in text.split("\n"):
        if not line or line[0] in "#;":
            continue
        if line[0] == "[":
            end = line.find("]")
            if end == -1:
                continue
            name = line[1:end]
        separator = re.search(r"[=:]", line)
        if separator is not None:
            key = line[: separator.start()]
            value = line[separator.start() + 1 :]
            sections.setdefault(name, {})[key] = value
    return sections


def read_ini_file(path: str | Path) -> Sections:
    """Parse an INI file; a file that cannot be read gives no sections."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            text = stream.read()
    except OSError:
        return {}
    return parse_ini(text)


@dataclass(frozen=True)
class Resource:
    """An image strip holding the frames of a control."""

    file: str
    width: int
    height: int
    frames: int


@dataclass(frozen=True)
class Control:
    """A parameter's widget and where it sits on the background."""

    type: str
    x: int
    y: int
    resource: Resource


def _parse_resources(sections: Mapping[str, Mapping[str, str]]) -> dict[str, Resource]:
    return {
        name: Resource(
            file=values["file"],
            width=_to_int(values["width"]),
            height=_to_int(values["height"]),
            frames=_to_int(values["frames"]),
        )
        for name, values in sections.items()
        if "file" in values
    }


def _parse_controls(
    sections: Mapping[str, Mapping[str, str]], resources: Mapping[str, Resource]
) -> dict[str, Control]:
    return {
        name: Control(
            type=values["type"],
            x=_to_int(values["pos_x"]),
            y=_to_int(values["pos_y"]),
            resource=resources[values["resource"]],
        )
        for name, values in sections.items()
        if "resource" in values
    }


@dataclass
class LayoutDescription:
    """The background image and the controls placed on it."""

    background: str = ""
    controls: dict[str, Control] = field(default_factory=dict)

    def _populate(self, sections: Mapping[str, Mapping[str, str]]) -> None:
        self.background = sections["layout"]["background"]
        self.controls = _parse_controls(sections, _parse_resources(sections))

    @classmethod
    def from_sections(cls, sections: Mapping[str, Mapping[str, str]]) -> LayoutDescription:
        """Build a layout from parsed sections.

        Raises KeyError for a missing key or resource and ValueError for a
        number that cannot be read.
        """
        layout = cls()
        layout._populate(sections)
        return layout

    @classmethod
    def from_file(cls, path: str | Path) -> LayoutDescription:
        """Load a layout file, logging problems and keeping what was read."""
        layout = cls()
        try:
            layout._populate(read_ini_file(path))
        except (KeyError, ValueError) as exc:
            log.error("invalid layout %s: %s", path, exc)
        return layout