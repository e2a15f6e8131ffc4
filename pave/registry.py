"""The JSON registry of links that pave manages."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pave.paths import get_links_file_path


class RegistryError(Exception):
    """Raised when the registry file cannot be read or parsed."""


@dataclass
class Link:
    """A managed link: its name, the file it runs and the file created for it."""

    name: str
    path: str
    target: str = ""


def _link_to_dict(link: Link) -> dict[str, str]:
    data = {"name": link.name, "path": link.path}
    if link.target:
        data["target"] = link.target
    return data


def _link_from_dict(data: Any) -> Link:
    if not isinstance(data, dict):
        raise RegistryError(f"failed to parse registry: invalid link entry {data!r}")
    values = {}
    for key in ("name", "path", "target"):
        value = data.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise RegistryError(f"failed to parse registry: field {key!r} is not a string")
        values[key] = value
    return Link(**values)


@dataclass
class Registry:
    """An ordered collection of links with unique names."""

    links: list[Link] = field(default_factory=list)

    def save(self) -> None:
        """Write the registry to the links file."""
        path = get_links_file_path()
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def add_link(self, link: Link) -> None:
        """Add ``link``, replacing any link with the same name."""
        self.remove_link(link.name)
        self.links.append(link)

    def remove_link(self, name: str) -> None:
        """Drop every link called ``name``."""
        self.links = [link for link in self.links if link.name != name]

    def find_link(self, name: str) -> Link | None:
        """Return the first link called ``name``, or None."""
        return next((link for link in self.links if link.name == name), None)

    def to_dict(self) -> dict[str, Any]:
        return {"links": [_link_to_dict(link) for link in self.links]}

    @classmethod
    def from_dict(cls, data: Any) -> Registry:
        if not isinstance(data, dict):
            raise RegistryError("failed to parse registry: expected a JSON object")
        entries = data.get("links") or []
        if not isinstance(entries, list):
            raise RegistryError("failed to parse registry: 'links' is not a list")
        return cls(links=[_link_from_dict(entry) for entry in entries])


def load_registry() -> Registry:
    """Read the registry from disk; a missing file gives an empty registry."""
    path = get_links_file_path()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Registry()
    except OSError as exc:
        raise RegistryError(f"failed to read registry: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RegistryError(f"failed to parse registry: {exc}") from exc
    return Registry.from_dict(data)