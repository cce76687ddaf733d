import re
from collections.abc import Sequence
from dataclasses import dataclass

from services.config import DEFAULT_WORKSPACE_RULES, WorkspaceNameRule


@dataclass(frozen=True)
class Named:
    name: str


@dataclass(frozen=True)
class Unnamed:
    pass


@dataclass(frozen=True)
class Failed:
    error: Exception


InferenceResult = Named | Unnamed | Failed


def infer_workspace_name(
    app_names: Sequence[str],
    process_names: Sequence[str],
    workspace_name: str,
    rules: Sequence[WorkspaceNameRule] = DEFAULT_WORKSPACE_RULES,
) -> InferenceResult:
    """Pick a label for a workspace from the applications running in it.

    Every rule scores one point per window whose process or app name matches
    one of its patterns. The best scoring rule names the workspace, earlier
    rules winning ties.
    """
    if len(app_names) != len(process_names):
        return Failed(
            ValueError(
                f"workspace {workspace_name}: {len(app_names)} app names "
                f"for {len(process_names)} processes"
            )
        )
    if not process_names:
        return Unnamed()

    try:
        compiled = [
            (rule.name, [re.compile(p, re.IGNORECASE) for p in rule.patterns])
            for rule in rules
        ]
    except re.error as e:
        return Failed(e)

    best_name, best_score = None, 0
    for name, patterns in compiled:
        score = sum(
            1
            for app, process in zip(app_names, process_names)
            if any(p.search(process) or p.search(app) for p in patterns)
        )
        if score > best_score:
            best_name, best_score = name, score

    return Named(best_name) if best_name is not None else Unnamed()
