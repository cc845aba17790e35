"""Loading and merging ``.jsonc`` configuration files."""

from __future__ import annotations

import json
import re
from pathlib import Path

from nyw.errors import ApplicationError
from nyw.files import read_file
from nyw.i18n import Label
from nyw.models import ConfigFile

_STRING = r'"(?:\\.|[^"\\])*"'
_COMMENTS = re.compile(rf"({_STRING})|//[^\n]*|/\*.*?\*/", re.DOTALL)
_TRAILING_COMMAS = re.compile(rf"({_STRING})|,(\s*[}}\]])")


def strip_jsonc(text: str) -> str:
    """Remove comments and trailing commas, leaving plain JSON."""
    without_comments = _COMMENTS.sub(
        lambda m: m.group(1) if m.group(1) is not None else " ", text
    )
    return _TRAILING_COMMAS.sub(
        lambda m: m.group(1) if m.group(1) is not None else m.group(2),
        without_comments,
    )


def get_config(src: str) -> ConfigFile:
    """Parse one configuration file."""
    try:
        content = read_file(src)
    except OSError as exc:
        raise ApplicationError(Label.ERROR_FILE_OPEN_FAILED, [str(src)]) from exc
    return ConfigFile.from_data(json.loads(strip_jsonc(content)))


def get_configs(path: str) -> list[ConfigFile]:
    """Parse every ``.jsonc`` file below *path*, creating *path* if missing."""
    directory = Path(path)
    if not directory.exists():
        try:
            directory.mkdir(parents=True)
        except OSError as exc:
            print(f"Failed to create directory: {exc}")
            return []

    configs: list[ConfigFile] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            configs.extend(get_configs(str(entry)))
        if entry.is_file() and entry.suffix == ".jsonc":
            configs.append(get_config(str(entry)))
    return configs


def get_merged_config(path: str) -> ConfigFile:
    """One configuration holding the packages of all files below *path*."""
    return ConfigFile.merged(get_configs(path))