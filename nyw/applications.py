"""Deciding which applications to install and which to remove."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence

from nyw import db
from nyw.models import Application
from nyw.package_manager import PackageManager, detect_package_manager

INSTALL_ACTION = "INSTALL"


def _manager_or_default(manager: PackageManager | None) -> PackageManager:
    if manager is None:
        return PackageManager(detect_package_manager())
    return manager


def get_applications_to_install(
    packages: Sequence[str], manager: PackageManager | None = None
) -> list[str]:
    """The *packages* that are not installed yet."""
    installed = set(_manager_or_default(manager).installed())
    return [package for package in packages if package not in installed]


def get_last_installed_applications(conn: sqlite3.Connection) -> list[Application]:
    """Applications installed with the most recent lock."""
    lock_id = db.get_latest_lock_id(conn)
    if lock_id is None:
        return []
    return db.get_applications_by_lock_id_and_action(conn, lock_id, INSTALL_ACTION)


def get_applications_to_remove(
    conn: sqlite3.Connection,
    packages: Sequence[str],
    manager: PackageManager | None = None,
) -> list[str]:
    """Previously installed applications no longer wanted but still present."""
    last_installed = [app.name for app in get_last_installed_applications(conn)]
    installed = set(_manager_or_default(manager).installed())
    wanted = set(packages)
    return [
        name for name in last_installed if name not in wanted and name in installed
    ]