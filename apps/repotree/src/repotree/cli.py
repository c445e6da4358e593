"""CLI for repotree."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from gh import GitHubClient, GitHubError, get_token

from . import __version__
from .errors import RepoTreeError
from .workflow import TreeLister

logger = logging.getLogger(__name__)

DOTENV_FILE = ".env"  # Only the working directory is searched


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command()
@click.argument("repo_name")
@click.option(
    "--token",
    help="GitHub token (if you would like to provide it explicitly instead of GITHUB_TOKEN)",
)
@click.option(
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the listing to this file instead of stdout",
)
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.version_option(__version__, prog_name="repotree")
def cli(repo_name: str, token: str | None, output_file: Path | None, verbose: int) -> None:
    """
    List every directory and file on the default branch of a GitHub repository.

    REPO_NAME is the repository in the format 'owner/repo'.
    """
    setup_logging(verbose)
    load_dotenv(Path.cwd() / DOTENV_FILE)

    lister = TreeLister(client_factory=GitHubClient)
    try:
        lister.run(repo_name, get_token(token), output_file)
    except (RepoTreeError, GitHubError) as e:
        logger.debug("Run failed at stage %s", lister.failed_stage.value)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
