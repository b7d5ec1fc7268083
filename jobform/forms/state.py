from __future__ import annotations

import json
import logging
from typing import Any

from jobform.forms.constants import ACKNOWLEDGMENT_KEYS, TEXT_FIELDS
from jobform.schemas.application import ApplicationState, PositionType

logger = logging.getLogger(__name__)


class FormState:
    """Owns the live ApplicationState and its named write paths."""

    def __init__(self, state: ApplicationState | None = None):
        self.state = state or ApplicationState()

    def update_field(self, name: str, value: str) -> None:
        if name not in TEXT_FIELDS:
            raise KeyError(f"Unknown form field '{name}'")
        if name == "position_type":
            self.state.position_type = PositionType(value)
            return
        setattr(self.state, name, value)

    def update_flag(self, name: str, checked: bool) -> None:
        if name not in ACKNOWLEDGMENT_KEYS:
            raise KeyError(f"Unknown acknowledgment '{name}'")
        self.state.acknowledgments[name] = bool(checked)

    def snapshot(self) -> dict[str, Any]:
        return self.state.model_dump(mode="json")

    def to_json(self) -> str:
        return json.dumps(self.snapshot(), ensure_ascii=False)

    @classmethod
    def from_snapshot(cls, raw: str | None) -> FormState:
        """Overlay a stored draft onto defaults, key by key.

        Unknown keys and values of the wrong type are dropped. Anything that
        does not decode to a JSON object yields plain defaults.
        """
        form = cls()
        if not raw:
            return form
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("draft_discarded reason=invalid_json: %s", exc)
            return form
        if not isinstance(data, dict):
            logger.warning("draft_discarded reason=not_an_object type=%s", type(data).__name__)
            return form

        for name in TEXT_FIELDS:
            value = data.get(name)
            if not isinstance(value, str):
                continue
            try:
                form.update_field(name, value)
            except ValueError:
                logger.debug("draft_value_ignored field=%s", name)

        acknowledgments = data.get("acknowledgments")
        if isinstance(acknowledgments, dict):
            for name in ACKNOWLEDGMENT_KEYS:
                checked = acknowledgments.get(name)
                if isinstance(checked, bool):
                    form.update_flag(name, checked)
        return form
