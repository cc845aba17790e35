"""Exceptions carrying a translatable message label."""

from __future__ import annotations

from collections.abc import Sequence

from nyw.i18n import Label, translate


class NywError(Exception):
    """Base error; its message is the translation of *label*."""

    def __init__(self, label: Label, params: Sequence[str] | None = None) -> None:
        self.label = label
        self.params = list(params) if params is not None else None
        super().__init__(translate(label, self.params))


class ApplicationError(NywError):
    """An error that ends the program."""


class PackageManagerError(ApplicationError):
    """A package manager could not be found or used."""


class NotInstalledError(PackageManagerError):
    pass


class WhichNotInstalledError(PackageManagerError):
    pass


class InstallFailedError(PackageManagerError):
    pass


class UninstallFailedError(PackageManagerError):
    pass


class CommandError(ApplicationError):
    """An external command could not be run or was refused."""


class UserAbortError(CommandError):
    pass


class CommandFailedError(CommandError):
    pass