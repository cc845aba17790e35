"""Translated user-facing messages."""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum, auto

DEFAULT_LOCALE = "en"


class Label(Enum):
    """Identifiers of every message the program shows."""

    ERROR_PACKAGE_MANAGER_NOT_INSTALLED = auto()
    ERROR_WHICH_NOT_INSTALLED = auto()
    ERROR_USER_ABORT = auto()
    ERROR_NO_ROOT = auto()
    ERROR_NO_AUR_HELPER = auto()
    ERROR_INSTALLATION_FAILED = auto()
    ERROR_COMMAND_STDOUT_FAILED = auto()
    ERROR_COMMAND_FAILED = auto()
    ERROR_UNINSTALL_FAILED = auto()
    ERROR_FILE_OPEN_FAILED = auto()
    ERROR_FILE_ALREADY_EXISTS = auto()
    ERROR_GET_POOL_ERROR = auto()
    ERROR_DATABASE_ERROR = auto()
    ERROR_IO = auto()
    INFO_CONFIRM_CONTINUE = auto()
    INFO_STARTING_PACKAGE_INSTALLATION = auto()
    INFO_STARTING_PACKAGE_REMOVAL = auto()
    INFO_EXECUTING_PRE_SCRIPT = auto()
    INFO_EXECUTING_POST_SCRIPT = auto()
    INFO_NEWLY_INSTALLED_PACKAGES = auto()
    INFO_NEWLY_UNINSTALLED_PACKAGES = auto()
    INFO_COPYING_FILE = auto()
    INFO_WRITING_FILE = auto()


TRANSLATIONS: dict[str, dict[Label, str]] = {
    "en": {
        Label.ERROR_PACKAGE_MANAGER_NOT_INSTALLED: "ERROR: The package manager {0} is not installed",
        Label.ERROR_WHICH_NOT_INSTALLED: "ERROR: The program which is not installed. This prevents dependency resolution",
        Label.ERROR_USER_ABORT: "ERROR: The user has aborted the operation",
        Label.ERROR_NO_ROOT: "ERROR: The program should be run as root. Try using sudo/doas.",
        Label.ERROR_NO_AUR_HELPER: "ERROR: No AUR helper found",
        Label.ERROR_INSTALLATION_FAILED: "ERROR: Failed to install packages",
        Label.ERROR_COMMAND_FAILED: "ERROR: Failed to spawn command",
        Label.ERROR_COMMAND_STDOUT_FAILED: "ERROR: Failed to get stdout from command",
        Label.ERROR_UNINSTALL_FAILED: "ERROR: Package uninstall failed",
        Label.ERROR_FILE_OPEN_FAILED: "ERROR: Failed to open file {0}",
        Label.ERROR_FILE_ALREADY_EXISTS: "ERROR: File {0} already exists. Overwriting.",
        Label.ERROR_GET_POOL_ERROR: "ERROR: Failed to get sqlite pool",
        Label.ERROR_DATABASE_ERROR: "ERROR: Database error: {0}",
        Label.ERROR_IO: "ERROR: An error occured: {0}",
        Label.INFO_NEWLY_UNINSTALLED_PACKAGES: "INFO: {0} packages got deleted",
        Label.INFO_CONFIRM_CONTINUE: "INFO: Do you want to continue? y/N: ",
        Label.INFO_STARTING_PACKAGE_INSTALLATION: "INFO: Starting package installation with: {0}",
        Label.INFO_STARTING_PACKAGE_REMOVAL: "INFO: Starting package removal with: {0}",
        Label.INFO_EXECUTING_PRE_SCRIPT: "INFO: Executing pre-script: {0}",
        Label.INFO_EXECUTING_POST_SCRIPT: "INFO: Executing post-script: {0}",
        Label.INFO_NEWLY_INSTALLED_PACKAGES: "INFO: {0} newly/installed packages",
        Label.INFO_COPYING_FILE: "INFO: Copying file {0} to {1}",
        Label.INFO_WRITING_FILE: "INFO: Writing content into file {0}",
    }
}


def current_locale() -> str:
    """Return the language part of ``$LANG``, lower-cased, or ``en``."""
    return os.environ.get("LANG", DEFAULT_LOCALE).split("_")[0].lower()


def translate(label: Label, params: Sequence[str] | None = None) -> str:
    """Return the text for *label*, with ``{i}`` replaced by ``params[i]``."""
    table = TRANSLATIONS.get(current_locale(), TRANSLATIONS[DEFAULT_LOCALE])
    text = table[label]
    for index, param in enumerate(params or ()):
        text = text.replace(f"{{{index}}}", param)
    return text