"""Command-line entry point.

Prints the configured user's Codeforces, CodeChef and AtCoder ratings,
reusing ratings fetched within the last two days and fetching the rest.
"""

import os, logging, time
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv

import ingest
from ingest import accounts, cache
from ingest.accounts import PlatformConfig
from etl import report

# Load environment variables from .env in the working directory (no-op if missing)
load_dotenv(find_dotenv(usecwd=True))

# ---------------------------------------------------------------------------
# Logging setup (controlled by CPR_LOGLEVEL, default WARNING)
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=os.getenv("CPR_LOGLEVEL", "WARNING").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)

REMOVE_MODES = ("accounts", "logs")

app = typer.Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})


def show_platform(
    account: PlatformConfig,
    force_update: bool = False,
    numbers_only: bool = False,
    now: Optional[int] = None,
) -> Optional[int]:
    """Print one platform's rating, from cache when possible.

    Returns the rating shown, or None when nothing was printed.
    """
    if not account.username.strip():
        return None

    now = int(time.time()) if now is None else now
    rating = cache.cached_rating(account.platform, account.setup_time, now, force_update)
    if rating is None:
        logger.debug("Fetching %s rating for %s", account.platform, account.username)
        rating = ingest.FETCHERS[account.platform](account.username)
        if rating is None:
            return None
        cache.append_record(account.platform, rating, now)

    report.print_rating(account.platform, rating, numbers_only)
    return rating


def orchestrate(force_update: bool = False, numbers_only: bool = False, now: Optional[int] = None) -> None:
    """Show the rating of every configured platform, one after another."""
    now = int(time.time()) if now is None else now
    configured = accounts.load_accounts()

    for platform in ingest.PLATFORMS:
        account = configured.get(platform)
        if account is None:
            continue
        show_platform(account, force_update=force_update, numbers_only=numbers_only, now=now)


def setup_accounts() -> bool:
    """Prompt for every username; False if stdin closed before the answers."""
    try:
        accounts.run_setup(ingest.PLATFORMS, prompt=input)
    except EOFError:
        typer.echo("No usernames entered; run with --setup from a terminal.")
        return False
    return True


def remove(mode: str) -> bool:
    """Wipe the store named by *mode*; False if the mode is unknown."""
    if mode == "accounts":
        accounts.clear_accounts()
    elif mode == "logs":
        cache.clear_log()
    else:
        return False
    return True


@app.command()
def cli(
    update: bool = typer.Option(False, "--update", "-u", help="Ignore cached ratings and fetch again."),
    remove_mode: Optional[str] = typer.Option(
        None, "--remove", "-r", metavar="accounts|logs", help="Delete saved usernames or rating history."
    ),
    setup: bool = typer.Option(False, "--setup", "-s", help="Enter the username for every platform."),
    numbers_only: bool = typer.Option(False, "--numbers-only", "-n", help="Print bare ratings only."),
):
    """Show your competitive-programming ratings."""
    if remove_mode is not None:
        if not remove(remove_mode):
            typer.echo(f"Usage: --remove <{'|'.join(REMOVE_MODES)}> (got '{remove_mode}')")
        return

    if setup:
        setup_accounts()
        return

    if not accounts.exists():
        logger.info("No accounts configured yet, running setup")
        if not setup_accounts():
            return

    orchestrate(force_update=update, numbers_only=numbers_only)


if __name__ == "__main__":
    app()
