import re

from services.config import DEFAULT_EXCLUSIONS, DEFAULT_SEPARATOR

_DEFAULT_SEPARATOR = re.compile(DEFAULT_SEPARATOR)


def is_excluded(process_name: str | None, exclusions=DEFAULT_EXCLUSIONS) -> bool:
    """Whether the process label should be shown instead of the window title."""
    return isinstance(process_name, str) and any(
        process_name.startswith(prefix) for prefix in exclusions
    )


def split_window_title(
    title: str | None, separator: re.Pattern = _DEFAULT_SEPARATOR
) -> str | None:
    """Trailing part of a `"<content> - <app>"` style title."""
    segments = separator.split(title) if title is not None else []
    if not segments:
        return title
    return segments[-1].strip()
