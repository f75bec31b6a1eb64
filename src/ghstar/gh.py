"""Thin wrapper around the GitHub CLI.

Authentication and pagination are left to `gh api`.
"""

import logging
import shutil
import subprocess
from typing import List, Sequence

from .errors import GhError, IdentityError, MissingDependencyError
from .models import Repo

logger = logging.getLogger(__name__)

INSTALL_HINTS = {
    "gh": "https://cli.github.com/",
    "git": "https://git-scm.com/downloads",
    "fzf": "https://github.com/junegunn/fzf#installation",
}

# one compact record per line, `--paginate` applies the filter to every page
STARRED_JQ = ".[] | {full_name, name, description, topics}"


def check_dependencies(executables: Sequence[str]) -> None:
    for exe in executables:
        if shutil.which(exe) is None:
            hint = INSTALL_HINTS.get(exe, "your package manager")
            raise MissingDependencyError(exe, hint)
        logger.debug(f"found {exe}")


def _gh_api(*args: str) -> str:
    cmd = ["gh", "api", *args]
    logger.debug(f"Running: {' '.join(cmd)}")
    proc = subprocess.run(cmd, capture_output=True, text=True)
    if proc.returncode != 0:
        raise GhError(
            proc.stderr.strip() or f"{' '.join(cmd)} exited {proc.returncode}"
        )
    return proc.stdout


def get_login() -> str:
    try:
        login = _gh_api("user", "--jq", ".login").strip()
    except GhError as e:
        logger.debug(f"gh api user failed: {e}")
        login = ""

    if not login:
        raise IdentityError("could not fetch authenticated user")
    return login


def list_starred(username: str) -> List[Repo]:
    content = _gh_api("--paginate", f"users/{username}/starred", "--jq", STARRED_JQ)
    repos = [Repo.from_json(line) for line in content.splitlines() if line.strip()]
    logger.debug(f"{username} has {len(repos)} starred repos")
    return repos
