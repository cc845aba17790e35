"""Detection and use of the system package manager."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from enum import Enum

from nyw.commands import run_command
from nyw.errors import (
    CommandError,
    InstallFailedError,
    NotInstalledError,
    PackageManagerError,
    UninstallFailedError,
    WhichNotInstalledError,
)
from nyw.i18n import Label


class PackageManagerKind(Enum):
    PACMAN = "pacman"
    PARU = "paru"
    YAY = "yay"
    APT = "apt"
    APK = "apk"
    WINGET = "winget"
    BREW = "brew"

    def command(self) -> str:
        """Name of the executable."""
        return self.value

    def install_param(self, update: bool = True) -> str:
        return _INSTALL_PARAMS[self]

    def list_param(self, update: bool = True) -> str:
        return _LIST_PARAMS[self]

    def uninstall_param(self, with_dependencies: bool) -> str:
        param = _UNINSTALL_PARAMS[self]
        if with_dependencies:
            param += _UNINSTALL_DEPENDENCY_SUFFIX.get(self, "")
        return param

    def needs_root(self) -> bool:
        return self not in (PackageManagerKind.PARU, PackageManagerKind.YAY)


_INSTALL_PARAMS = {
    PackageManagerKind.PACMAN: "-S",
    PackageManagerKind.PARU: "-S",
    PackageManagerKind.YAY: "-S",
    PackageManagerKind.APT: "install",
    PackageManagerKind.APK: "add",
    PackageManagerKind.WINGET: "install",
    PackageManagerKind.BREW: "install",
}

_LIST_PARAMS = {
    PackageManagerKind.PACMAN: "-Qqe",
    PackageManagerKind.PARU: "-Qqe",
    PackageManagerKind.YAY: "-Qqe",
    PackageManagerKind.APT: "list --installed 2>/dev/null | grep -v '^Listing\\.\\.\\.' | cut -d/ -f1",
    PackageManagerKind.APK: "info",
    PackageManagerKind.WINGET: "list",
    PackageManagerKind.BREW: "leaves",
}

_UNINSTALL_PARAMS = {
    PackageManagerKind.PACMAN: "-R",
    PackageManagerKind.PARU: "-R",
    PackageManagerKind.YAY: "-R",
    PackageManagerKind.APT: "remove",
    PackageManagerKind.APK: "del",
    PackageManagerKind.WINGET: "uninstall",
    PackageManagerKind.BREW: "uninstall",
}

_UNINSTALL_DEPENDENCY_SUFFIX = {
    PackageManagerKind.PACMAN: "ncs",
    PackageManagerKind.PARU: "ncs",
    PackageManagerKind.YAY: "ncs",
}

_AUR_HELPERS = (PackageManagerKind.PARU, PackageManagerKind.YAY)
_PACKAGE_MANAGERS = (
    PackageManagerKind.PACMAN,
    PackageManagerKind.APT,
    PackageManagerKind.APK,
    PackageManagerKind.BREW,
    PackageManagerKind.WINGET,
)


def check_installed(kind: PackageManagerKind) -> None:
    """Raise unless *kind*'s executable is found by ``which``."""
    try:
        completed = subprocess.run(
            ["which", kind.command()], capture_output=True, check=False
        )
    except OSError as exc:
        raise WhichNotInstalledError(Label.ERROR_WHICH_NOT_INSTALLED) from exc
    if completed.returncode != 0:
        raise NotInstalledError(Label.ERROR_PACKAGE_MANAGER_NOT_INSTALLED)


def _first_installed(candidates: Sequence[PackageManagerKind]) -> PackageManagerKind:
    for kind in candidates:
        try:
            check_installed(kind)
        except PackageManagerError:
            continue
        return kind
    raise NotInstalledError(Label.ERROR_NO_AUR_HELPER)


def detect_aur_helper() -> PackageManagerKind:
    """Return the first installed AUR helper."""
    return _first_installed(_AUR_HELPERS)


def detect_package_manager() -> PackageManagerKind:
    """Return the first installed system package manager."""
    return _first_installed(_PACKAGE_MANAGERS)


class PackageManager:
    """An installed package manager that can add and remove packages."""

    def __init__(self, kind: PackageManagerKind) -> None:
        check_installed(kind)
        self.kind = kind

    def _invocation(self, param: str) -> tuple[str, list[str]]:
        if self.kind.needs_root():
            return "sudo", [self.kind.command(), param]
        return self.kind.command(), [param]

    def install_packages(self, packages: Sequence[str], update: bool = True) -> None:
        program, args = self._invocation(self.kind.install_param(update))
        try:
            status = run_command(
                program, [*args, *packages], Label.INFO_STARTING_PACKAGE_INSTALLATION
            )
        except CommandError as exc:
            raise InstallFailedError(Label.ERROR_INSTALLATION_FAILED) from exc
        if status != 0:
            raise InstallFailedError(Label.ERROR_INSTALLATION_FAILED)

    def uninstall_packages(
        self, packages: Sequence[str], with_dependencies: bool = True
    ) -> None:
        program, args = self._invocation(self.kind.uninstall_param(with_dependencies))
        try:
            status = run_command(
                program, [*args, *packages], Label.INFO_STARTING_PACKAGE_REMOVAL
            )
        except CommandError as exc:
            raise UninstallFailedError(Label.ERROR_UNINSTALL_FAILED) from exc
        if status != 0:
            raise UninstallFailedError(Label.ERROR_UNINSTALL_FAILED)

    def installed(self) -> list[str]:
        """Names of explicitly installed packages, one per output line."""
        completed = subprocess.run(
            [self.kind.command(), "-Qqe"], capture_output=True, check=False
        )
        return completed.stdout.decode("utf-8").split("\n")