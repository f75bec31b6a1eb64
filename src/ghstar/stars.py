from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .models import Repo


def matches_tag(repo: Repo, tag: str) -> bool:
    if repo.name is not None and tag in repo.name:
        return True
    if repo.description is not None and tag in repo.description:
        return True
    return any(tag in topic for topic in repo.topics or ())


def select_names(repos: Iterable[Repo], tag: str | None = None) -> List[str]:
    """Project repos to sorted, unique, non-blank full names.

    With a tag, only repos whose name, description or one of the topics
    contains it (case-sensitive) are kept.
    """
    if tag:
        repos = (repo for repo in repos if matches_tag(repo, tag))
    names = {repo.full_name for repo in repos}
    return sorted(name for name in names if name and name.strip())


def basename(full_name: str) -> str:
    return full_name.rsplit("/", 1)[-1]


# NOTE: only the basename is compared, an unrelated directory with the same
# name counts as already cloned.
def split_existing(
    names: Sequence[str], root: Path = Path(".")
) -> Tuple[List[str], List[str]]:
    new, existing = [], []
    for name in names:
        if root.joinpath(basename(name)).exists():
            existing.append(name)
        else:
            new.append(name)
    return new, existing
