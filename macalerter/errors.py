"""Exceptions raised when sending or managing notifications."""

from __future__ import annotations


class AlerterError(Exception):
    """Base class for every failure reported by this package."""

    prefix = "alerter error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class BinaryExtractionError(AlerterError):
    """The notifier executable could not be written to the cache."""

    prefix = "failed to extract alerter binary"


class ProcessSpawnError(AlerterError):
    """The notifier process could not be started."""

    prefix = "failed to spawn alerter process"


class AlerterRuntimeError(AlerterError):
    """The notifier ran but failed, or its output could not be understood."""

    prefix = "alerter runtime error"