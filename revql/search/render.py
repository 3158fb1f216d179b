"""Render matches for the terminal (rich text) or as JSON."""

from __future__ import annotations

import json
from typing import Any

from rich.text import Text

from revql.schema.types import FieldDef, Match, PathStep, StepKind

TERMINAL_STYLE = "red"
TYPE_STYLE = "green"
FIELD_STYLE = "white"
ARROW = " -> "


def render_match(match: Match) -> Text:
    """Render a match as ``Terminal: Query.user -> User.friend -> User.name``."""
    text = Text()
    text.append(match.terminal_name, style=TERMINAL_STYLE)
    text.append(": ")
    for i, step in enumerate(match.path):
        if i > 0:
            text.append(ARROW)
        text.append_text(render_step(step))
    return text


def render_step(step: PathStep) -> Text:
    if step.kind is StepKind.POSSIBLE_TYPE:
        return Text.assemble("... on ", (step.name, TYPE_STYLE))
    return Text.assemble((step.owner, TYPE_STYLE), ".", (step.name, FIELD_STYLE))


def match_to_dict(match: Match) -> dict[str, Any]:
    terminal: dict[str, Any] = {"name": match.terminal_name}
    if isinstance(match.terminal, FieldDef):
        terminal["type"] = str(match.terminal.type)
    else:
        terminal["kind"] = match.terminal.kind.name
    return {
        "operation": match.operation,
        "root": match.root,
        "path": [
            {
                "owner": step.owner,
                "name": step.name,
                "type": str(step.type),
                "kind": step.kind.value,
            }
            for step in match.path
        ],
        "terminal": terminal,
        "terminal_kind": match.terminal_kind.value,
    }


def render_json(matches: list[Match]) -> str:
    return json.dumps([match_to_dict(m) for m in matches], indent=2)
