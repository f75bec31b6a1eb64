"""clone starred GitHub repositories

username  defaults to the user gh is logged in as
tag       keep only repos whose name, description or topics contain it
"""

import argparse
import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .clone import clone_repos
from .config import Config, load_config
from .errors import GhStarError, IdentityError
from .gh import check_dependencies, get_login, list_starred
from .logging_config import setup_logging
from .stars import basename, select_names, split_existing
from .survey import select_repos

logger = logging.getLogger(__name__)

REQUIRED_EXECUTABLES = ("gh", "git")


@dataclass(frozen=True)
class RunOptions:
    clone_all: bool = False
    username: str | None = None
    tag: str | None = None
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghstar",
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "positional", nargs="*", metavar="username [tag]", help="GitHub user and tag"
    )
    parser.add_argument(
        "--all", action="store_true", help="Clone every new repo without asking"
    )
    parser.add_argument("--debug", action="store_true", help="Set log level as DEBUG")
    return parser


def parse_args(
    parser: argparse.ArgumentParser, argv: Sequence[str] | None = None
) -> RunOptions:
    args = parser.parse_intermixed_args(argv)
    if len(args.positional) > 2:
        parser.error(f"too many arguments: {' '.join(args.positional[2:])}")

    username, tag = (list(args.positional) + [None, None])[:2]
    return RunOptions(
        clone_all=args.all,
        username=username or None,
        tag=tag or None,
        debug=args.debug,
    )


def run(options: RunOptions, config: Config) -> None:
    executables = list(REQUIRED_EXECUTABLES)
    if not options.clone_all and config.select.picker == "fzf":
        executables.append("fzf")
    check_dependencies(executables)

    username = options.username
    if username is None:
        username = get_login()
        logger.info(f"using authenticated user {username}")

    logger.info(f"fetching starred repos of {username}")
    repos = list_starred(username)

    names = select_names(repos, options.tag)
    if len(names) == 0:
        if options.tag:
            logger.info(f"no starred repositories found matching tag '{options.tag}'")
        else:
            logger.info("no starred repositories found")
        return
    logger.info(f"found {len(names)} starred repos")

    output_dir = Path(config.clone.output_dir)
    names, existing = split_existing(names, output_dir)
    for name in existing:
        logger.info(f"skip {name}, {output_dir / basename(name)} already exists")
    if len(names) == 0:
        logger.info("no new repositories to clone")
        return

    selected = select_repos(names, config.select.picker, options.clone_all)
    if len(selected) == 0:
        logger.info("no repositories selected")
        return

    clone_repos(selected, config.clone)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    options = parse_args(parser, argv)

    setup_logging(options.debug)

    logger.debug(f"{options=}")

    try:
        run(options, load_config())
    except IdentityError as e:
        logger.error(f"Error: {e}")
        parser.print_usage(sys.stderr)
        sys.exit(1)
    except GhStarError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except subprocess.CalledProcessError as e:
        logger.error(f"Error: {e}")
        sys.exit(e.returncode or 1)


if __name__ == "__main__":
    main()
