import re
from collections.abc import Iterator
from dataclasses import dataclass

from services.config import TitleConfig
from services.containers import Node, Window, Workspace


@dataclass(frozen=True)
class WorkspaceProcesses:
    app_names: tuple[str, ...] = ()
    process_names: tuple[str, ...] = ()


def iter_windows(node: Node) -> Iterator[Window]:
    """Depth-first walk yielding window leaves in tree order."""
    if isinstance(node, Window):
        yield node
        return
    children = getattr(node, "children", None)
    if not isinstance(children, (tuple, list)):
        return
    for child in children:
        yield from iter_windows(child)


def app_name(window: Window, separator: re.Pattern) -> str:
    """Application part of a `"<content> - <app>"` title, else the process name.

    Titles without a separator are document content, not an application name.
    """
    segments = separator.split(window.title) if window.title else []
    if len(segments) > 1 and (name := segments[-1].strip()):
        return name
    return window.process_name or ""


def extract_workspace_processes(
    workspace: Workspace, config: TitleConfig | None = None
) -> WorkspaceProcesses:
    separator = (config or TitleConfig()).separator
    app_names: list[str] = []
    process_names: list[str] = []

    for window in iter_windows(workspace):
        app_names.append(app_name(window, separator))
        process_names.append(window.process_name or "")

    return WorkspaceProcesses(tuple(app_names), tuple(process_names))
