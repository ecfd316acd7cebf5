"""A handle on a notification whose process is still running."""

from __future__ import annotations

import subprocess
from typing import Optional

from .errors import AlerterRuntimeError
from .response import AlerterResponse


def _decode(raw: Optional[bytes]) -> str:
    return (raw or b"").decode("utf-8", errors="replace").strip()


class NotificationHandle:
    """Owns a running notifier process.

    The process is killed when the handle is closed, used as a context manager
    or garbage collected, unless it has been waited on or detached.
    """

    def __init__(self, process: subprocess.Popen, json: bool) -> None:
        self._process: Optional[subprocess.Popen] = process
        self._json_output = json

    def _take(self) -> subprocess.Popen:
        if self._process is None:
            raise AlerterRuntimeError("handle already consumed")
        return self._process

    def _finish(self, process: subprocess.Popen) -> AlerterResponse:
        self._process = None
        try:
            stdout, stderr = process.communicate()
        except (OSError, ValueError) as exc:
            raise AlerterRuntimeError(f"failed to read stdout: {exc}") from exc
        if process.returncode != 0:
            raise AlerterRuntimeError(_decode(stderr))
        text = _decode(stdout)
        if self._json_output:
            return AlerterResponse.from_json(text)
        return AlerterResponse.from_plain_text(text)

    def wait(self) -> AlerterResponse:
        """Block until the notification is answered and return the response."""
        process = self._take()
        try:
            process.wait()
        except OSError as exc:
            self._process = None
            raise AlerterRuntimeError(f"failed to wait on child: {exc}") from exc
        return self._finish(process)

    def try_wait(self) -> Optional[AlerterResponse]:
        """Return the response if the process has exited, otherwise None."""
        process = self._take()
        try:
            status = process.poll()
        except OSError as exc:
            raise AlerterRuntimeError(f"failed to check child status: {exc}") from exc
        if status is None:
            return None
        return self._finish(process)

    def detach(self) -> None:
        """Let the process run on without this handle."""
        process = self._process
        self._process = None
        if process is not None:
            for stream in (process.stdout, process.stderr):
                if stream is not None:
                    stream.close()

    def close(self) -> None:
        """Kill the process if it is still owned by this handle."""
        process = self._process
        self._process = None
        if process is None:
            return
        try:
            process.kill()
        except OSError:
            pass
        try:
            process.communicate()
        except (OSError, ValueError):
            pass

    def __enter__(self) -> "NotificationHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass