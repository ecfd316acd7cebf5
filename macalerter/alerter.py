"""Building and sending notifications through the notifier executable."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .binary import extract_binary
from .errors import AlerterRuntimeError, BinaryExtractionError, ProcessSpawnError
from .handle import NotificationHandle
from .response import AlerterResponse

_PathLike = Union[str, "os.PathLike[str]"]
_MAX_SECONDS = 2**32 - 1


def _resolve_binary(override: Optional[_PathLike]) -> Path:
    if override is not None:
        return Path(override)
    try:
        return extract_binary()
    except OSError as exc:
        raise BinaryExtractionError(str(exc)) from exc


def _run_alerter(binary: Path, args: List[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run(
            [str(binary), *args], capture_output=True, check=False
        )
    except OSError as exc:
        raise ProcessSpawnError(str(exc)) from exc
    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        raise AlerterRuntimeError(stderr)
    return completed


def _seconds(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"seconds must be an integer, got {value!r}")
    if not 0 <= value <= _MAX_SECONDS:
        raise ValueError(f"seconds must be between 0 and {_MAX_SECONDS}, got {value}")
    return value


class Alerter:
    """A notification under construction; every setter returns the builder."""

    def __init__(self, message: str) -> None:
        self._message = message
        self._title: Optional[str] = None
        self._subtitle: Optional[str] = None
        self._sound: Optional[str] = None
        self._actions: Optional[List[str]] = None
        self._dropdown_label: Optional[str] = None
        self._reply: Optional[str] = None
        self._close_label: Optional[str] = None
        self._group: Optional[str] = None
        self._sender: Optional[str] = None
        self._app_icon: Optional[str] = None
        self._content_image: Optional[str] = None
        self._timeout: Optional[int] = None
        self._json = False
        self._delay: Optional[int] = None
        self._at: Optional[str] = None
        self._ignore_dnd = False
        self._binary_path: Optional[Path] = None

    def binary_path(self, path: _PathLike) -> "Alerter":
        """Use the given executable instead of the bundled one."""
        self._binary_path = Path(path)
        return self

    def title(self, title: str) -> "Alerter":
        self._title = title
        return self

    def subtitle(self, subtitle: str) -> "Alerter":
        self._subtitle = subtitle
        return self

    def sound(self, sound: str) -> "Alerter":
        self._sound = sound
        return self

    def actions(self, actions: Iterable[str]) -> "Alerter":
        self._actions = [str(action) for action in actions]
        return self

    def dropdown_label(self, label: str) -> "Alerter":
        self._dropdown_label = label
        return self

    def reply(self, placeholder: str) -> "Alerter":
        self._reply = placeholder
        return self

    def close_label(self, label: str) -> "Alerter":
        self._close_label = label
        return self

    def group(self, group: str) -> "Alerter":
        self._group = group
        return self

    def sender(self, sender: str) -> "Alerter":
        self._sender = sender
        return self

    def app_icon(self, path: str) -> "Alerter":
        self._app_icon = path
        return self

    def content_image(self, path: str) -> "Alerter":
        self._content_image = path
        return self

    def timeout(self, seconds: int) -> "Alerter":
        self._timeout = _seconds(seconds)
        return self

    def json(self, enabled: bool) -> "Alerter":
        self._json = bool(enabled)
        return self

    def delay(self, seconds: int) -> "Alerter":
        self._delay = _seconds(seconds)
        return self

    def at(self, time: str) -> "Alerter":
        self._at = time
        return self

    def ignore_dnd(self, enabled: bool) -> "Alerter":
        self._ignore_dnd = bool(enabled)
        return self

    def build_args(self) -> List[str]:
        """Return the command-line arguments for the notifier."""
        args = ["--message", self._message]
        options = [
            ("--title", self._title),
            ("--subtitle", self._subtitle),
            ("--sound", self._sound),
            ("--actions", ",".join(self._actions) if self._actions is not None else None),
            ("--dropdown-label", self._dropdown_label),
            ("--reply", self._reply),
            ("--close-label", self._close_label),
            ("--group", self._group),
            ("--sender", self._sender),
            ("--app-icon", self._app_icon),
            ("--content-image", self._content_image),
            ("--timeout", str(self._timeout) if self._timeout is not None else None),
        ]
        for flag, value in options:
            if value is not None:
                args.extend((flag, value))
        if self._json:
            args.append("--json")
        if self._delay is not None:
            args.extend(("--delay", str(self._delay)))
        if self._at is not None:
            args.extend(("--at", self._at))
        if self._ignore_dnd:
            args.append("--ignore-dnd")
        return args

    def _parse(self, stdout: bytes) -> AlerterResponse:
        text = stdout.decode("utf-8", errors="replace").strip()
        if self._json:
            return AlerterResponse.from_json(text)
        return AlerterResponse.from_plain_text(text)

    def send_async(self) -> NotificationHandle:
        """Start the notifier and return at once with a handle on it."""
        binary = _resolve_binary(self._binary_path)
        try:
            process = subprocess.Popen(
                [str(binary), *self.build_args()],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise ProcessSpawnError(str(exc)) from exc
        return NotificationHandle(process, self._json)

    def send(self) -> AlerterResponse:
        """Show the notification and block until it is answered."""
        binary = _resolve_binary(self._binary_path)
        completed = _run_alerter(binary, self.build_args())
        return self._parse(completed.stdout)

    @staticmethod
    def remove(group_id: str, binary: Optional[_PathLike] = None) -> None:
        """Remove the notifications of a group (``"ALL"`` for every group)."""
        _run_alerter(_resolve_binary(binary), ["--remove", group_id])

    @staticmethod
    def list(group_id: str, binary: Optional[_PathLike] = None) -> str:
        """Return the notifier's listing of a group (``"ALL"`` for every group)."""
        completed = _run_alerter(_resolve_binary(binary), ["--list", group_id])
        return completed.stdout.decode("utf-8", errors="replace").strip()