"""
Command-line interface for tldr-cache.

Shows, lists, edits and renders tldr pages from the local cache:
- tldr tar: Show the page for a command
- tldr --list: List all cached commands
- tldr --edit tar: Open a page in $EDITOR
- tldr --render FILE: Print a local markdown file
"""

import logging
import os
from pathlib import Path
from typing import Optional

import click

from tldr_cache import __version__
from tldr_cache.cache import PageCache
from tldr_cache.cache.freshness import Freshness
from tldr_cache.config import get_settings
from tldr_cache.exceptions import PageReadError, TldrCacheException
from tldr_cache.types import PLATFORM_ALIASES, parse_platform

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

PROG_NAME = "tldr-cache"
UPSTREAM_URL = "https://github.com/tldr-pages/tldr"

USAGE_EXAMPLES = """\
Examples:

    $ tldr tar
    $ tldr --list

To render a local file (for testing):

    $ tldr --render /path/to/file.md
"""


def print_page(path: Path) -> None:
    """
    Print a page file.

    Raises:
        PageReadError: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PageReadError(f"Could not open file: {e}", details={"path": str(path)}) from e
    except UnicodeDecodeError as e:
        raise PageReadError(f"Could not decode file as UTF-8: {e}", details={"path": str(path)}) from e
    click.echo(text, nl=not text.endswith("\n"))


def warn_freshness(freshness: Freshness) -> None:
    """Tell the user when the cache is missing or outdated."""
    if freshness.is_missing:
        click.echo(click.style(
            "Cache not found. Populate it by downloading the tldr pages archive.",
            fg='yellow'
        ), err=True)
    elif freshness.is_stale:
        click.echo(click.style(
            f"The cache hasn't been updated for {freshness.age_days} days. "
            "You should probably update it.",
            fg='yellow'
        ), err=True)


@click.command(epilog=USAGE_EXAMPLES)
@click.argument('command', required=False)
@click.option('--list', '-l', 'list_pages', is_flag=True, help='List all commands in the cache')
@click.option('--edit', '-e', is_flag=True, help='Edit command in the cache')
@click.option(
    '--render', '-f',
    type=click.Path(path_type=Path),
    default=None,
    help='Render a specific markdown file'
)
@click.option(
    '--os', '-o', 'os_type',
    type=click.Choice(sorted(PLATFORM_ALIASES), case_sensitive=False),
    default=None,
    help='Override the operating system'
)
@click.option('--show-paths', is_flag=True, help='Show the resolved cache paths')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.version_option(__version__, '--version', prog_name=PROG_NAME, message='%(prog)s v%(version)s')
@click.pass_context
def cli(
    ctx: click.Context,
    command: Optional[str],
    list_pages: bool,
    edit: bool,
    render: Optional[Path],
    os_type: Optional[str],
    show_paths: bool,
    verbose: bool,
):
    """
    Show tldr pages for CLI commands from the local cache.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    try:
        # Render local file and exit
        if render is not None:
            print_page(render)
            raise SystemExit(0)

        platform = parse_platform(os_type) if os_type else None
        cache = PageCache.default(get_settings(), platform=platform)

        if show_paths:
            info = cache.info()
            click.echo(f"Cache root: {info['cache_root']}")
            click.echo(f"Pages root: {info['pages_root']}")
            click.echo(f"Platform: {info['platform']} ({info['platform_dir'] or 'common only'})")
            if info['freshness'] is not None:
                age = f", {info['age_days']} days old" if info['age_days'] is not None else ""
                click.echo(f"Cache state: {info['freshness']}{age}")
            raise SystemExit(0)

        if list_pages:
            if cache.freshness_check_enabled:
                warn_freshness(cache.check_freshness())
            pages = cache.list_pages()
            click.echo(", ".join(pages))
            raise SystemExit(0)

        if edit:
            if not command:
                click.echo("You must specify command to edit tldr-markdown.", err=True)
                raise SystemExit(1)
            editor = os.environ.get("EDITOR")
            if not editor:
                click.echo("$EDITOR is not set.", err=True)
                raise SystemExit(1)
            path = cache.find_page_to_edit(command)
            logger.debug(f"Editing {path} with {editor}")
            click.edit(filename=str(path), editor=editor)
            raise SystemExit(0)

        if command:
            if cache.freshness_check_enabled:
                warn_freshness(cache.check_freshness())
            path = cache.find_page(command)
            if path is None:
                click.echo(f"Page {command} not found in cache")
                click.echo("Try updating the cache, or submit a pull request to:")
                click.echo(UPSTREAM_URL)
                raise SystemExit(1)
            print_page(path)
            raise SystemExit(0)

    except TldrCacheException as e:
        click.echo(click.style(f"Error: {e.message}", fg='red'), err=True)
        logger.debug(f"{e.error_code}: {e.details}")
        raise SystemExit(e.exit_code)

    # Some flags can be run without a command.
    click.echo(ctx.get_help())
    raise SystemExit(1)


if __name__ == '__main__':
    cli()
