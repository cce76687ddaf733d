import json
import re
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from services.errors import ConfigError

DEFAULT_EXCLUSIONS = ("Spotify",)
DEFAULT_SEPARATOR = r"[-—]"

# startswith("") holds for every process, so prefixes must not be empty
ProcessPrefix = Annotated[str, Field(min_length=1)]


class WorkspaceNameRule(BaseModel):
    """Names a workspace after the applications matching `patterns`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    patterns: tuple[str, ...]


def _rule(name: str, *patterns: str) -> WorkspaceNameRule:
    return WorkspaceNameRule(name=name, patterns=patterns)


DEFAULT_WORKSPACE_RULES = (
    _rule(
        "Browser",
        "^firefox", "^chrome", "^chromium", "^msedge", "^brave", "^vivaldi",
        "^opera", "^zen", "^google chrome", "^microsoft.? edge",
    ),
    _rule(
        "Code",
        "^code", "^vscode", "^visual studio", "^cursor", "^idea", "^pycharm",
        "^webstorm", "^sublime", "^devenv",
    ),
    _rule(
        "Terminal",
        "^windowsterminal", "^wezterm", "^alacritty", "^kitty", "^powershell",
        "^pwsh", r"^cmd(\.exe)?$",
    ),
    _rule("Chat", "^discord", "^slack", "^ms-teams", "^teams", "^telegram", "^whatsapp", "^signal"),
    _rule("Music", "^spotify", "^tidal", "^foobar", "^musicbee"),
    _rule("Files", r"^explorer(\.exe)?$", "^file explorer", "^totalcmd", "^dopus"),
    _rule("Mail", "^outlook", "^olk", "^thunderbird", "^mailspring"),
    _rule("Games", "^steam", "^epicgameslauncher", r"^battle\.net", "^lutris"),
    _rule("Graphics", "^photoshop", "^gimp", "^krita", "^figma", "^inkscape", "^blender"),
    _rule("Video", "^obs", "^mpv", "^vlc", "^premiere", "^resolve", "^kdenlive"),
)


class TitleConfig(BaseModel):
    """Settings injected into the title resolver."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    exclusions: tuple[ProcessPrefix, ...] = DEFAULT_EXCLUSIONS
    separator: re.Pattern = Field(default_factory=lambda: re.compile(DEFAULT_SEPARATOR))
    workspace_rules: tuple[WorkspaceNameRule, ...] = DEFAULT_WORKSPACE_RULES

    @field_validator("separator", mode="before")
    @classmethod
    def compile_separator(cls, v: Any) -> re.Pattern:
        if isinstance(v, re.Pattern):
            return v
        if not isinstance(v, str):
            raise ValueError("separator must be a regular expression string")
        try:
            return re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid separator pattern: {e}") from e

    @classmethod
    def from_dict(cls, data: Any) -> "TitleConfig":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"invalid config: {e}") from e


def load_config(path: str | Path) -> TitleConfig:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"could not read config {path}: {e}") from e
    return TitleConfig.from_dict(data)
