"""Creating, removing and inspecting the links pave manages."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from pave.paths import get_bin_dir
from pave.registry import Link, load_registry


class LinkError(Exception):
    """Raised when a link cannot be created or removed."""


@dataclass
class LinkStatus:
    """A managed link together with whether the file it points at exists."""

    name: str
    path: str
    target: str = ""
    status: str = ""


def _is_windows() -> bool:
    return sys.platform in ("win32", "cygwin")


def is_in_path(directory: str | os.PathLike[str]) -> bool:
    """Tell whether ``directory`` appears in ``PATH``, comparing absolute paths."""
    path_env = os.environ.get("PATH", "")
    if not path_env:
        return False
    wanted = os.path.abspath(directory)
    return any(os.path.abspath(entry) == wanted for entry in path_env.split(os.pathsep))


def _bin_dir() -> Path:
    directory = get_bin_dir()
    if not is_in_path(directory):
        print(f"Warning: {directory} is not in your PATH. Add it to use commands globally.")
        if sys.platform.startswith("linux"):
            print(f"Add with: echo 'export PATH={directory}:$PATH' >> ~/.bashrc")
        elif sys.platform == "darwin":
            print(f"Add with: echo 'export PATH={directory}:$PATH' >> ~/.zshrc")
    return directory


def _create_unix_symlink(bin_dir: Path, name: str, target: str) -> Path:
    link_path = bin_dir / name
    try:
        os.symlink(target, link_path)
    except OSError as exc:
        raise LinkError(f"failed to create symlink: {exc}") from exc
    return link_path


def _create_windows_wrapper(bin_dir: Path, name: str, target: str) -> Path:
    wrapper_path = bin_dir / f"{name}.cmd"
    target = target.replace("/", "\\")
    content = f'@echo off\r\n"{target}" %*\r\n'
    try:
        wrapper_path.write_bytes(content.encode("utf-8"))
        wrapper_path.chmod(0o755)
    except OSError as exc:
        raise LinkError(f"failed to create wrapper: {exc}") from exc
    return wrapper_path


def _status_of(path: str) -> str:
    try:
        os.stat(path)
    except OSError:
        return "broken"
    return "valid"


def create_link(name: str, path: str | os.PathLike[str], verbose: bool = False) -> None:
    """Expose ``path`` as ``name`` in the bin directory and record it."""
    abs_path = os.path.abspath(path)
    try:
        os.stat(abs_path)
    except OSError as exc:
        raise LinkError(f"target path does not exist: {abs_path}") from exc

    bin_dir = _bin_dir()
    if _is_windows():
        target = _create_windows_wrapper(bin_dir, name, abs_path)
    else:
        target = _create_unix_symlink(bin_dir, name, abs_path)

    if verbose:
        print(f"Created: {bin_dir / name} -> {abs_path}")

    registry = load_registry()
    registry.add_link(Link(name=name, path=abs_path, target=str(target)))
    registry.save()


def remove_link(name: str, verbose: bool = False) -> None:
    """Delete the link called ``name`` and drop it from the registry."""
    bin_dir = _bin_dir()
    link_path = bin_dir / (f"{name}.cmd" if _is_windows() else name)
    try:
        os.remove(link_path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise LinkError(f"failed to remove link: {exc}") from exc

    if verbose:
        print(f"Removed: {link_path}")

    registry = load_registry()
    registry.remove_link(name)
    registry.save()


def list_links(verbose: bool = False) -> list[LinkStatus]:
    """Return every managed link with its status."""
    registry = load_registry()
    results = [
        LinkStatus(name=link.name, path=link.path, target=link.target, status=_status_of(link.path))
        for link in registry.links
    ]
    if verbose:
        print(f"Found {len(results)} link(s)")
    return results


def status_link(name: str, verbose: bool = False) -> LinkStatus | None:
    """Return the status of the link called ``name``, or None if it is unknown."""
    registry = load_registry()
    link = registry.find_link(name)
    if link is None:
        return None
    status = _status_of(link.path)
    if verbose:
        print(f"Checking status of {name}")
    return LinkStatus(name=link.name, path=link.path, target=link.target, status=status)