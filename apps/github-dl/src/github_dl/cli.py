"""CLI for github-dl."""

import logging
from pathlib import Path

import click
import httpx
from dotenv import load_dotenv

from gh import GitHubClient, GitHubError

from .download import download as download_folder
from .errors import GitHubDlError
from .metadata import discover_descriptors, read_descriptor
from .refresh import refresh as refresh_folders

logger = logging.getLogger(__name__)


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def fail(error: Exception) -> None:
    """Report an error and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


# Errors reported to the user instead of a traceback
REPORTED_ERRORS = (GitHubDlError, GitHubError, httpx.HTTPError, OSError)


# ============ CLI Group ============

@click.group()
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token")
@click.option("--use-gh-cli", is_flag=True, help="Use gh cli credentials")
@click.option("--retries", "-r", type=int, default=1, show_default=True, help="Attempts on network errors")
@click.option("--timeout", type=float, default=30.0, show_default=True, help="HTTP timeout in seconds")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(
    ctx: click.Context,
    token: str | None,
    use_gh_cli: bool,
    retries: int,
    timeout: float,
    verbose: int,
) -> None:
    """Download GitHub folders and keep them up to date."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("token", token)
    ctx.obj.setdefault("use_gh_cli", use_gh_cli)
    ctx.obj.setdefault("retries", retries)
    ctx.obj.setdefault("timeout", timeout)


def get_client(ctx: click.Context) -> GitHubClient:
    """Return the context's client, creating it on first use."""
    if "client" not in ctx.obj:
        client = GitHubClient(
            token=ctx.obj["token"],
            use_gh_cli=ctx.obj["use_gh_cli"],
            max_retries=ctx.obj["retries"],
            timeout=ctx.obj["timeout"],
        )
        ctx.call_on_close(client.close)
        ctx.obj["client"] = client
    return ctx.obj["client"]


# ============ Commands ============

@cli.command()
@click.argument("link")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory")
@click.pass_context
def download(ctx, link, output):
    """Download a GitHub folder (https://github.com/owner/repo/tree/ref/path)."""
    try:
        destination = download_folder(get_client(ctx), link, output)
    except REPORTED_ERRORS as e:
        fail(e)
    click.echo(f"Downloaded to {destination}")


@cli.command()
@click.option(
    "-b", "--base-dir",
    default=".",
    show_default=True,
    type=click.Path(path_type=Path),
    help="Directory to search for downloaded folders",
)
@click.pass_context
def refresh(ctx, base_dir):
    """Refresh all downloaded folders below the base directory."""
    if not base_dir.is_dir():
        fail(NotADirectoryError(f"Base directory '{base_dir}' does not exist"))

    try:
        result = refresh_folders(get_client(ctx), base_dir, notify=click.echo)
    except REPORTED_ERRORS as e:
        fail(e)

    if not result.discovered:
        click.echo(f"No downloaded folders found in {base_dir}")
        return
    click.echo(f"\nRefreshed {len(result.refreshed)}, skipped {len(result.skipped)}")


@cli.command("list")
@click.option(
    "-b", "--base-dir",
    default=".",
    show_default=True,
    type=click.Path(path_type=Path),
    help="Directory to search for downloaded folders",
)
def list_folders(base_dir):
    """List downloaded folders and their source links."""
    if not base_dir.is_dir():
        fail(NotADirectoryError(f"Base directory '{base_dir}' does not exist"))

    paths = discover_descriptors(base_dir)
    if not paths:
        click.echo(f"No downloaded folders found in {base_dir}")
        return

    for path in paths:
        try:
            descriptor = read_descriptor(path)
        except REPORTED_ERRORS as e:
            fail(e)
        click.echo(f"{path.parent}  {descriptor.url}")


def main() -> None:
    """Console entry point."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
