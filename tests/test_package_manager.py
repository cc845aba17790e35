import subprocess

import pytest

from nyw.errors import (
    InstallFailedError,
    NotInstalledError,
    UninstallFailedError,
    WhichNotInstalledError,
)
from nyw.i18n import Label
from nyw.package_manager import (
    PackageManager,
    PackageManagerKind,
    check_installed,
    detect_aur_helper,
    detect_package_manager,
)


def _fake_system(installed, calls=None, command_status=0, stdout=b""):
    def fake_run(cmd, **kwargs):
        if calls is not None:
            calls.append(list(cmd))
        if cmd[0] == "which":
            code = 0 if cmd[1] in installed else 1
            return subprocess.CompletedProcess(cmd, code, b"", b"")
        return subprocess.CompletedProcess(cmd, command_status, stdout, b"")

    return fake_run


@pytest.fixture
def quiet_env(monkeypatch):
    monkeypatch.delenv("LOG", raising=False)
    monkeypatch.delenv("MOCK", raising=False)
    monkeypatch.setenv("LANG", "en_US.UTF-8")


@pytest.mark.parametrize(
    "kind, command",
    [
        (PackageManagerKind.PACMAN, "pacman"),
        (PackageManagerKind.PARU, "paru"),
        (PackageManagerKind.YAY, "yay"),
        (PackageManagerKind.APT, "apt"),
        (PackageManagerKind.APK, "apk"),
        (PackageManagerKind.WINGET, "winget"),
        (PackageManagerKind.BREW, "brew"),
    ],
)
def test_command(kind, command):
    assert kind.command() == command


@pytest.mark.parametrize(
    "kind, param",
    [
        (PackageManagerKind.PACMAN, "-S"),
        (PackageManagerKind.APT, "install"),
        (PackageManagerKind.APK, "add"),
        (PackageManagerKind.BREW, "install"),
    ],
)
def test_install_param(kind, param):
    assert kind.install_param(True) == param
    assert kind.install_param(False) == param


def test_list_param():
    assert PackageManagerKind.PACMAN.list_param(True) == "-Qqe"
    assert PackageManagerKind.BREW.list_param(True) == "leaves"
    assert PackageManagerKind.APK.list_param(False) == "info"


def test_uninstall_param_with_and_without_dependencies():
    assert PackageManagerKind.PACMAN.uninstall_param(False) == "-R"
    assert PackageManagerKind.PACMAN.uninstall_param(True) == "-Rncs"
    assert PackageManagerKind.APT.uninstall_param(True) == "remove"
    assert PackageManagerKind.APT.uninstall_param(False) == "remove"
    assert PackageManagerKind.APK.uninstall_param(True) == "del"


def test_needs_root():
    assert PackageManagerKind.PACMAN.needs_root() is True
    assert PackageManagerKind.APT.needs_root() is True
    assert PackageManagerKind.PARU.needs_root() is False
    assert PackageManagerKind.YAY.needs_root() is False


def test_check_installed_missing(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system(set()))
    with pytest.raises(NotInstalledError) as info:
        check_installed(PackageManagerKind.PACMAN)
    assert info.value.label is Label.ERROR_PACKAGE_MANAGER_NOT_INSTALLED


def test_check_installed_without_which(monkeypatch, quiet_env):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(WhichNotInstalledError) as info:
        check_installed(PackageManagerKind.APT)
    assert info.value.label is Label.ERROR_WHICH_NOT_INSTALLED


def test_check_installed_queries_which(monkeypatch, quiet_env):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_system({"brew"}, calls))
    check_installed(PackageManagerKind.BREW)
    with pytest.raises(NotInstalledError) as info:
        check_installed(PackageManagerKind.PACMAN)
    assert info.value.label is Label.ERROR_PACKAGE_MANAGER_NOT_INSTALLED
    assert calls == [["which", "brew"], ["which", "pacman"]]


def test_detect_package_manager_order(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"apt", "brew"}))
    assert detect_package_manager() is PackageManagerKind.APT


def test_detect_package_manager_none(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"paru"}))
    with pytest.raises(NotInstalledError) as info:
        detect_package_manager()
    assert info.value.label is Label.ERROR_NO_AUR_HELPER


def test_detect_aur_helper_prefers_paru(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"yay", "paru"}))
    assert detect_aur_helper() is PackageManagerKind.PARU
    monkeypatch.setattr(subprocess, "run", _fake_system({"yay"}))
    assert detect_aur_helper() is PackageManagerKind.YAY


def test_detect_aur_helper_none(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"pacman"}))
    with pytest.raises(NotInstalledError) as info:
        detect_aur_helper()
    assert str(info.value) == "ERROR: No AUR helper found"


def test_manager_requires_installed(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system(set()))
    with pytest.raises(NotInstalledError):
        PackageManager(PackageManagerKind.PACMAN)


def test_install_with_sudo_in_mock_mode(monkeypatch, quiet_env, capsys):
    monkeypatch.setattr(subprocess, "run", _fake_system({"pacman"}))
    monkeypatch.setenv("MOCK", "1")
    PackageManager(PackageManagerKind.PACMAN).install_packages(["vim", "git"], True)
    out = capsys.readouterr().out
    assert "MOCK: sudo pacman -S vim git" in out
    assert "Starting package installation with: sudo pacman -S vim git" in out


def test_install_without_sudo_for_aur_helper(monkeypatch, quiet_env, capsys):
    monkeypatch.setattr(subprocess, "run", _fake_system({"paru"}))
    monkeypatch.setenv("MOCK", "1")
    PackageManager(PackageManagerKind.PARU).install_packages(["foo"], True)
    out = capsys.readouterr().out
    assert "MOCK: paru -S foo" in out
    assert "sudo" not in out


def test_uninstall_in_mock_mode(monkeypatch, quiet_env, capsys):
    monkeypatch.setattr(subprocess, "run", _fake_system({"pacman"}))
    monkeypatch.setenv("MOCK", "1")
    PackageManager(PackageManagerKind.PACMAN).uninstall_packages(["vim"], True)
    out = capsys.readouterr().out
    assert "MOCK: sudo pacman -Rncs vim" in out
    assert "Starting package removal with" in out


def test_install_runs_command(monkeypatch, quiet_env, capsys):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_system({"apk"}, calls))
    PackageManager(PackageManagerKind.APK).install_packages(["curl"], True)
    out = capsys.readouterr().out
    assert "Starting package installation with: sudo apk add curl" in out
    assert "MOCK:" not in out
    assert calls[-1] == ["sudo", "apk", "add", "curl"]


def test_install_failure(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"pacman"}, command_status=1))
    manager = PackageManager(PackageManagerKind.PACMAN)
    with pytest.raises(InstallFailedError) as info:
        manager.install_packages(["vim"], True)
    assert info.value.label is Label.ERROR_INSTALLATION_FAILED


def test_uninstall_failure(monkeypatch, quiet_env):
    monkeypatch.setattr(subprocess, "run", _fake_system({"yay"}, command_status=2))
    manager = PackageManager(PackageManagerKind.YAY)
    with pytest.raises(UninstallFailedError) as info:
        manager.uninstall_packages(["vim"], False)
    assert info.value.label is Label.ERROR_UNINSTALL_FAILED


def test_installed_splits_lines(monkeypatch, quiet_env):
    calls = []
    monkeypatch.setattr(
        subprocess, "run", _fake_system({"pacman"}, calls, stdout=b"vim\ngit\n")
    )
    manager = PackageManager(PackageManagerKind.PACMAN)
    assert manager.installed() == ["vim", "git", ""]
    assert calls[-1] == ["pacman", "-Qqe"]