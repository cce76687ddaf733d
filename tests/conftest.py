"""Pytest fixtures for focused title resolution tests."""

import pytest
from loguru import logger

from services.containers import (
    Container,
    ContainerType,
    FocusSnapshot,
    Window,
    Workspace,
)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def coding_workspace():
    """Workspace with two browser windows and an editor, nested in splits."""
    return Workspace(
        name="2",
        children=(
            Window(title="Docs - Google Chrome", process_name="chrome"),
            Container(
                type=ContainerType.SPLIT,
                children=(
                    Window(title="Issues - Google Chrome", process_name="chrome"),
                    Window(title="main.py - project - Visual Studio Code", process_name="code"),
                ),
            ),
        ),
    )


@pytest.fixture
def window_snapshot():
    def build(title=None, process_name=None, **kwargs):
        return FocusSnapshot(
            focused_container=Window(title=title, process_name=process_name, **kwargs),
            focused_workspace=Workspace(name="1"),
        )

    return build


@pytest.fixture
def glazewm_output():
    """Focus state as reported by GlazeWM."""
    return {
        "focusedContainer": {
            "type": "window",
            "title": "Report — Notepad",
            "processName": "notepad.exe",
            "className": "Notepad",
            "state": {"type": "floating", "centered": True},
        },
        "focusedWorkspace": {
            "type": "workspace",
            "name": "3",
            "displayName": "Notes",
            "children": [
                {
                    "type": "split",
                    "children": [
                        {"type": "window", "title": "Report — Notepad", "processName": "notepad.exe"},
                        {"type": "window", "title": "Terminal", "processName": "WindowsTerminal"},
                    ],
                },
            ],
        },
    }
