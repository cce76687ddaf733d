from collections.abc import Callable, Sequence
from functools import partial

from loguru import logger

from services.config import TitleConfig
from services.containers import FocusSnapshot, Window, Workspace
from services.titles import is_excluded, split_window_title
from services.workspace_names import (
    Failed,
    InferenceResult,
    Named,
    Unnamed,
    infer_workspace_name,
)
from services.workspace_processes import extract_workspace_processes

NameInference = Callable[[Sequence[str], Sequence[str], str], InferenceResult]


class TitleResolver:
    """Turns a focus snapshot into the label shown in the bar."""

    def __init__(
        self,
        config: TitleConfig | None = None,
        infer_name: NameInference | None = None,
    ):
        self.config = config or TitleConfig()
        self.infer_name = infer_name or partial(
            infer_workspace_name, rules=self.config.workspace_rules
        )

    def resolve_title(self, snapshot: FocusSnapshot | None) -> str | None:
        if snapshot is None:
            return None
        workspace = snapshot.focused_workspace
        container = snapshot.focused_container
        if workspace is None or container is None:
            return None

        match container:
            case Window(title=title, process_name=process_name):
                if is_excluded(process_name, self.config.exclusions):
                    return process_name
                return split_window_title(title, self.config.separator)
            case _:
                return self._workspace_title(workspace)

    def resolve_process_name(self, snapshot: FocusSnapshot | None) -> str | None:
        if snapshot is None:
            return None
        match snapshot.focused_container:
            case Window(process_name=process_name):
                return process_name
            case _:
                return None

    def _workspace_title(self, workspace: Workspace) -> str:
        fallback = (
            workspace.display_name
            if workspace.display_name is not None
            else f"Workspace {workspace.name}"
        )
        try:
            processes = extract_workspace_processes(workspace, self.config)
            result = self.infer_name(
                processes.app_names, processes.process_names, workspace.name
            )
        except Exception:
            logger.exception(f"Failed to infer a name for workspace {workspace.name}")
            return fallback

        match result:
            case Named(name=name):
                return name
            case Failed(error=error):
                logger.warning(
                    f"Could not infer a name for workspace {workspace.name}: {error}"
                )
            case Unnamed():
                pass
            case _:
                logger.warning(f"Unexpected inference result {result!r}, ignoring")
        return fallback


_default_resolver = TitleResolver()


def resolve_title(snapshot: FocusSnapshot | None) -> str | None:
    return _default_resolver.resolve_title(snapshot)


def resolve_process_name(snapshot: FocusSnapshot | None) -> str | None:
    return _default_resolver.resolve_process_name(snapshot)
