"""Command that brings the system in line with the configuration."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence
from contextlib import closing

from nyw import db
from nyw.applications import get_applications_to_install, get_applications_to_remove
from nyw.commands import run_command
from nyw.config import get_merged_config
from nyw.errors import ApplicationError
from nyw.files import copy_file, platform_path, write_file
from nyw.i18n import Label
from nyw.models import Application, DotConfig, LockAdd, Script
from nyw.package_manager import PackageManager, detect_aur_helper, detect_package_manager

_LOCK_HASH = "()"


def _run_scripts(scripts: Iterable[Script], label: Label) -> None:
    for script in scripts:
        run_command("sh", [script.bin], label)


def _apply_dot_config(dot: DotConfig) -> None:
    if dot.src is not None:
        copy_file(dot.src, dot.dest)
    elif dot.content is not None:
        write_file(dot.content, dot.dest)


def _sync(base: str) -> None:
    config = get_merged_config(base)
    packages = [p for p in config.packages if not p.is_aur]
    aur_names = [p.name for p in config.packages if p.is_aur]
    names = [p.name for p in packages]

    pre_scripts = [s for p in packages for s in (p.pre_script or [])]
    dot_configs = [d for p in packages for d in (p.dot_configs or [])]
    post_scripts = [s for p in packages for s in (p.post_script or [])]

    with closing(db.connect(os.path.join(base, "lock.db"))) as conn:
        _run_scripts(pre_scripts, Label.INFO_EXECUTING_PRE_SCRIPT)

        aur_manager = PackageManager(detect_aur_helper()) if aur_names else None
        manager = PackageManager(detect_package_manager())

        to_install = get_applications_to_install(names, manager) if names else []
        if to_install:
            manager.install_packages(to_install, True)

        if aur_manager is not None:
            aur_to_install = get_applications_to_install(aur_names, manager)
            if aur_to_install:
                aur_manager.install_packages(aur_to_install, True)

        to_remove = get_applications_to_remove(conn, names, manager)
        if to_remove:
            manager.uninstall_packages(to_remove, True)

        for dot in dot_configs:
            _apply_dot_config(dot)

        _run_scripts(post_scripts, Label.INFO_EXECUTING_POST_SCRIPT)

        lock = db.save_lock(conn, LockAdd(hash=_LOCK_HASH))
        db.save_applications(
            conn, [Application(lock.id, name, "INSTALL") for name in names]
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Install, remove and configure packages; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="nyw", description="Declarative package and dotfile management."
    )
    parser.add_argument(
        "--path",
        default=platform_path(),
        help="directory holding the .jsonc configuration and the lock database",
    )
    args = parser.parse_args(argv)

    try:
        _sync(args.path)
    except ApplicationError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(ApplicationError(Label.ERROR_IO, [str(exc)]), file=sys.stderr)
        return 1
    except ValueError as exc:
        print(ApplicationError(Label.ERROR_IO, [str(exc)]), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())