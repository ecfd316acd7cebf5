"""Installing the notifier executable into a per-user cache directory."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Optional, Union

import platformdirs

CACHE_APP_NAME = "macalerter"
BUNDLED_BINARY = Path(__file__).resolve().parent / "bin" / "alerter"

_PathLike = Union[str, "os.PathLike[str]"]


def _default_cache_dir() -> Path:
    return Path(platformdirs.user_cache_dir(CACHE_APP_NAME))


def extract_binary(
    data: Optional[bytes] = None, cache_dir: Optional[_PathLike] = None
) -> Path:
    """Write the executable to the cache, once per content hash, and return its path.

    ``data`` defaults to the executable shipped with the package; ``cache_dir``
    defaults to the user's cache directory. Raises ``OSError`` on failure.
    """
    if data is None:
        data = BUNDLED_BINARY.read_bytes()
    directory = Path(cache_dir) if cache_dir is not None else _default_cache_dir()

    digest = hashlib.sha256(data).hexdigest()[:16]
    directory.mkdir(parents=True, exist_ok=True)

    binary_path = directory / f"alerter-{digest}"
    if binary_path.exists():
        return binary_path

    # Write under a private name first so concurrent callers never see a partial file.
    tmp_path = directory / f"alerter-{digest}.tmp.{os.getpid()}"
    tmp_path.write_bytes(data)
    tmp_path.chmod(0o755)
    os.replace(tmp_path, binary_path)
    return binary_path


def get_binary_path(
    data: Optional[bytes] = None, cache_dir: Optional[_PathLike] = None
) -> Path:
    """Return the cached executable's path, extracting it if needed."""
    return extract_binary(data, cache_dir)