import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .config import CloneConfig

logger = logging.getLogger(__name__)


def clone_repos(repos: Sequence[str], config: CloneConfig) -> None:
    """gh repo clone, one repo after another

    Stops at the first failing clone by letting CalledProcessError propagate.
    """
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    for repo in repos:
        cmd = ["gh", "repo", "clone", repo]
        if config.git_config:
            cmd.extend(["--", *config.git_config])
        logger.info(f"Running: {' '.join(cmd)}")

        subprocess.run(cmd, cwd=output_dir, check=True)

    logger.info(f"cloned {len(repos)} repos")
