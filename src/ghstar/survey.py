import logging
import subprocess
from typing import List, Sequence, Set

from survey import routines

logger = logging.getLogger(__name__)

PROMPT = "select repos to clone: "

# fzf exits 1 when nothing matched, 130 (aborted) fails the run
FZF_NO_MATCH = 1


def survey_repos(repos: Sequence[str]) -> List[str]:
    # why pyright infers this as None? its real type is Set[int].
    indexes: Set[int] = routines.basket(  # type: ignore
        PROMPT,
        options=repos,
    )
    return [repos[index] for index in sorted(indexes or ())]


def fzf_repos(repos: Sequence[str]) -> List[str]:
    cmd = ["fzf", "--multi", "--prompt", PROMPT]
    logger.debug(f"Running: {' '.join(cmd)}")
    proc = subprocess.run(
        cmd,
        input="\n".join(repos),
        stdout=subprocess.PIPE,
        text=True,
    )
    if proc.returncode == FZF_NO_MATCH:
        return []
    proc.check_returncode()

    chosen = {line for line in proc.stdout.splitlines() if line}
    return [repo for repo in repos if repo in chosen]


PICKERS = {
    "survey": survey_repos,
    "fzf": fzf_repos,
}


def select_repos(
    repos: Sequence[str], picker: str = "survey", clone_all: bool = False
) -> List[str]:
    if clone_all:
        return list(repos)

    logger.debug(f"pick from {len(repos)} repos with {picker}")
    return PICKERS[picker](repos)
