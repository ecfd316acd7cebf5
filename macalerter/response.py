"""The user's reaction to a notification."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from .errors import AlerterRuntimeError


@dataclass(frozen=True)
class AlerterResponse:
    """How a notification was activated, and any value that came with it."""

    activation_type: str
    activation_value: Optional[str] = None

    @classmethod
    def from_plain_text(cls, text: str) -> "AlerterResponse":
        """Build a response from the notifier's plain text output."""
        return cls(activation_type=text.strip())

    @classmethod
    def from_json(cls, text: str) -> "AlerterResponse":
        """Build a response from the notifier's JSON output."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AlerterRuntimeError(f"failed to parse JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise AlerterRuntimeError(
                "failed to parse JSON: expected an object with activationType"
            )
        if "activationType" not in data:
            raise AlerterRuntimeError("failed to parse JSON: missing field `activationType`")

        activation_type = data["activationType"]
        if not isinstance(activation_type, str):
            raise AlerterRuntimeError(
                "failed to parse JSON: activationType must be a string"
            )
        activation_value = data.get("activationValue")
        if activation_value is not None and not isinstance(activation_value, str):
            raise AlerterRuntimeError(
                "failed to parse JSON: activationValue must be a string or null"
            )
        return cls(activation_type=activation_type, activation_value=activation_value)