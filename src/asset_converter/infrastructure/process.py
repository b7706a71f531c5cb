"""Subprocess-backed command runner."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from asset_converter.application.results import CommandResult
from asset_converter.errors import CommandLaunchError


class SubprocessCommandRunner:
    """Run external commands synchronously, capturing stderr."""

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run ``command`` and block until it exits.

        Raises
        ------
        CommandLaunchError
            If the process cannot be started.
        """
        try:
            completed = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise CommandLaunchError(f"Failed to launch '{command}': {exc}") from exc
        return CommandResult(exit_code=completed.returncode, stderr=completed.stderr)
