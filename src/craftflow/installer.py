"""Blocking invocation of the project's package installer."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

__all__ = ["COMMAND_NOT_FOUND", "InstallResult", "InstallRunner", "run_install"]

LOGGER = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of an installer run."""

    command: tuple[str, ...]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


InstallRunner = Callable[[Sequence[str], Path], InstallResult]


def run_install(command: Sequence[str], cwd: Path) -> InstallResult:
    """Run ``command`` in ``cwd`` with the parent's standard streams.

    The call blocks until the installer exits. Failures are reported through
    :attr:`InstallResult.returncode` rather than raised; an executable that
    cannot be found yields :data:`COMMAND_NOT_FOUND`.
    """

    args = tuple(command)
    executable = shutil.which(args[0]) or args[0]
    LOGGER.debug("Running %s in %s", " ".join(args), cwd)
    try:
        completed = subprocess.run([executable, *args[1:]], cwd=cwd, check=False)
    except FileNotFoundError:
        LOGGER.error("Command not found: %s", args[0])
        return InstallResult(command=args, returncode=COMMAND_NOT_FOUND)
    return InstallResult(command=args, returncode=completed.returncode)
