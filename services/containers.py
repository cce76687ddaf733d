from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from services.errors import MalformedContainerError


class ContainerType(str, Enum):
    ROOT = "root"
    MONITOR = "monitor"
    WORKSPACE = "workspace"
    SPLIT = "split"
    WINDOW = "window"


class WindowState(str, Enum):
    TILING = "tiling"
    FLOATING = "floating"
    MINIMIZED = "minimized"
    FULLSCREEN = "fullscreen"


@dataclass(frozen=True)
class Container:
    """A structural node: root, monitor or split."""

    type: ContainerType
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Workspace:
    name: str
    display_name: str | None = None
    children: tuple["Node", ...] = ()
    type: ContainerType = field(default=ContainerType.WORKSPACE, init=False)


@dataclass(frozen=True)
class Window:
    """A leaf holding an application window.

    `state` is only set when the window manager reports one, which is what
    makes window controls (floating toggle and friends) available.
    """

    title: str | None = None
    process_name: str | None = None
    class_name: str | None = None
    state: WindowState | None = None
    type: ContainerType = field(default=ContainerType.WINDOW, init=False)


Node = Container | Workspace | Window


@dataclass(frozen=True)
class FocusSnapshot:
    focused_container: Node | None = None
    focused_workspace: Workspace | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "FocusSnapshot":
        """Build a snapshot from window manager output, dropping unusable parts."""
        if not isinstance(data, dict):
            logger.warning(f"Ignoring focus state of type {type(data).__name__}")
            return cls()

        container = None
        if (raw := data.get("focusedContainer")) is not None:
            try:
                container = parse_container(raw)
            except MalformedContainerError as e:
                logger.warning(f"Unusable focused container: {e}")

        workspace = None
        if (raw := data.get("focusedWorkspace")) is not None:
            try:
                parsed = parse_container(raw)
            except MalformedContainerError as e:
                logger.warning(f"Unusable focused workspace: {e}")
            else:
                if isinstance(parsed, Workspace):
                    workspace = parsed
                else:
                    logger.warning(
                        f"Focused workspace has type {parsed.type.value!r}, ignoring"
                    )

        return cls(focused_container=container, focused_workspace=workspace)


class ContainerPayload(BaseModel):
    """A container as reported by GlazeWM, before it becomes a Node."""

    model_config = ConfigDict(extra="ignore")

    type: ContainerType
    name: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    title: str | None = None
    process_name: str | None = Field(default=None, alias="processName")
    class_name: str | None = Field(default=None, alias="className")
    state: WindowState | None = None
    children: list[Any] = Field(default_factory=list)

    @field_validator("display_name", "title", "process_name", "class_name", mode="before")
    @classmethod
    def drop_non_strings(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("name", mode="before")
    @classmethod
    def name_as_string(cls, v: Any) -> str | None:
        # workspace names come through as numbers when unnamed
        return None if v is None else str(v)

    @field_validator("state", mode="before")
    @classmethod
    def known_state(cls, v: Any) -> WindowState | None:
        # GlazeWM reports `{"type": "floating", ...}`, older payloads a bare string.
        if isinstance(v, dict):
            v = v.get("type")
        if v is None:
            return None
        try:
            return WindowState(v)
        except ValueError:
            logger.debug(f"Unknown window state {v!r}")
            return None

    @field_validator("children", mode="before")
    @classmethod
    def children_as_list(cls, v: Any) -> list[Any]:
        return v if isinstance(v, list) else []


def _parse_children(raw: list[Any]) -> tuple[Node, ...]:
    children = []
    for child in raw:
        try:
            children.append(parse_container(child))
        except MalformedContainerError as e:
            logger.debug(f"Skipping child container: {e}")
    return tuple(children)


def parse_container(data: Any) -> Node:
    """Convert a GlazeWM container payload into a Container, Workspace or Window."""
    try:
        payload = ContainerPayload.model_validate(data)
    except ValidationError as e:
        details = "; ".join(error["msg"] for error in e.errors())
        raise MalformedContainerError(f"invalid container payload: {details}") from e

    match payload.type:
        case ContainerType.WINDOW:
            return Window(
                title=payload.title,
                process_name=payload.process_name,
                class_name=payload.class_name,
                state=payload.state,
            )
        case ContainerType.WORKSPACE:
            if payload.name is None:
                raise MalformedContainerError("workspace without a name")
            return Workspace(
                name=payload.name,
                display_name=payload.display_name,
                children=_parse_children(payload.children),
            )
        case _:
            return Container(
                type=payload.type,
                children=_parse_children(payload.children),
            )
