"""Running external commands and asking the user for confirmation."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from nyw.errors import CommandFailedError, UserAbortError
from nyw.i18n import Label, translate
from nyw.log import LogType, log


def run_command(program: str, args: Sequence[str], info_label: Label) -> int:
    """Run *program* with *args*; return its exit status (0).

    With ``$MOCK`` set, only log the command. Raises CommandFailedError if
    the program cannot be started or exits with a non-zero status.
    """
    command_line = f"{program} {' '.join(args)}"
    log(LogType.INFO, translate(info_label, [command_line]))

    if "MOCK" in os.environ:
        log(LogType.INFO, f"MOCK: {command_line}")
        return 0

    try:
        completed = subprocess.run([program, *args], check=False)
    except OSError as exc:
        raise CommandFailedError(Label.ERROR_COMMAND_FAILED) from exc
    if completed.returncode != 0:
        raise CommandFailedError(Label.ERROR_COMMAND_FAILED)
    return completed.returncode


def ask_continue() -> None:
    """Ask the user to confirm; raise UserAbortError unless they answer y/yes."""
    try:
        answer = input(translate(Label.INFO_CONFIRM_CONTINUE))
    except EOFError:
        answer = ""
    if answer.strip() in ("yes", "y"):
        return
    raise UserAbortError(Label.ERROR_USER_ABORT)