"""Reading, writing and fetching files, and platform paths."""

from __future__ import annotations

import os
import sys
import urllib.request
from pathlib import Path

from nyw.errors import ApplicationError
from nyw.i18n import Label, translate

_FALLBACK_UID = 1000


def read_file(src: str | os.PathLike) -> str:
    """Return the UTF-8 text of *src*."""
    return Path(src).read_bytes().decode("utf-8")


def _fetch(url: str) -> str:
    with urllib.request.urlopen(url) as response:
        return response.read().decode("utf-8", errors="replace")


def copy_file(source: str, destination: str) -> None:
    """Copy a local file or an ``https://`` resource to *destination*."""
    if source.startswith("https://"):
        content = _fetch(source)
    else:
        print(translate(Label.INFO_COPYING_FILE, [source, destination]))
        content = Path(source).read_bytes().decode("utf-8", errors="replace")
    write_file(content, destination)


def write_file(content: str, destination: str) -> None:
    """Write *content* to *destination*, creating parent directories."""
    print(translate(Label.INFO_WRITING_FILE, [destination]))
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))


def get_uid() -> int:
    """Owner uid of the current process, or 1000 if it cannot be read."""
    try:
        return os.stat("/proc/self").st_uid
    except OSError:
        return _FALLBACK_UID


def check_permission() -> None:
    """Raise ApplicationError unless running as root."""
    if get_uid() != 0:
        raise ApplicationError(Label.ERROR_NO_ROOT)


def platform_path() -> str:
    """Directory holding configuration and the lock database."""
    if sys.platform.startswith("win"):
        return "C:\\Program Files\\nyw"
    return "/etc/nyw"