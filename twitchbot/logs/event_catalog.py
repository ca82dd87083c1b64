"""Catalog of human readable event templates.

Templates live in ``event_templates.json`` inside this package, keyed by
domain and then action. A missing or broken file never stops the bot: the
catalog then holds a single ``app/load_error`` entry and every other event
falls back to its derived name.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

TemplateKey = tuple[str, str]

TEMPLATES_RESOURCE = "event_templates.json"
LOAD_ERROR_KEY: TemplateKey = ("app", "load_error")

EVENT_TEMPLATES: dict[TemplateKey, str] = {}


def _read_document(path: str | Path | None) -> Any:
    if path is not None:
        text = Path(path).read_text(encoding="utf-8")
    else:
        text = resources.files(__package__).joinpath(TEMPLATES_RESOURCE).read_text(
            encoding="utf-8"
        )
    return json.loads(text)


def flatten_templates(document: Any) -> dict[TemplateKey, str]:
    """Turn ``{domain: {action: template}}`` into ``{(domain, action): template}``.

    Entries of any other shape are skipped.
    """
    if not isinstance(document, dict):
        return {}
    return {
        (domain, action): template
        for domain, actions in document.items()
        if isinstance(domain, str) and isinstance(actions, dict)
        for action, template in actions.items()
        if isinstance(action, str) and isinstance(template, str)
    }


def load_event_templates(path: str | Path | None = None) -> dict[TemplateKey, str]:
    try:
        return flatten_templates(_read_document(path))
    except FileNotFoundError:
        return {LOAD_ERROR_KEY: "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {LOAD_ERROR_KEY: f"Failed to load event templates: {e}"[:200]}


def reload_event_templates(path: str | Path | None = None) -> None:
    """Swap in the templates found at ``path`` (packaged file by default)."""
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = load_event_templates(path)


def template_for(domain: str, action: str) -> str | None:
    return EVENT_TEMPLATES.get((domain, action))


reload_event_templates()

__all__ = [
    "EVENT_TEMPLATES",
    "flatten_templates",
    "load_event_templates",
    "reload_event_templates",
    "template_for",
]
