from services.containers import (
    Container,
    ContainerType,
    FocusSnapshot,
    Window,
    WindowState,
    Workspace,
)
from services.title_resolver import (
    TitleResolver,
    resolve_process_name,
    resolve_title,
)

__all__ = [
    "Container",
    "ContainerType",
    "FocusSnapshot",
    "TitleResolver",
    "Window",
    "WindowState",
    "Workspace",
    "resolve_process_name",
    "resolve_title",
]
