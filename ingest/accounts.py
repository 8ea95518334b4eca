"""Per-platform usernames and the time each one was set up.

Stored as ``accounts.txt`` next to the ratings log, one line per platform::

    Codeforces=alice|1700000000
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union

from . import cache

logger = logging.getLogger(__name__)

# Explicit accounts location; None means <data dir>/accounts.txt
ACCOUNTS_PATH: Optional[Path] = None


@dataclass(frozen=True)
class PlatformConfig:
    platform: str
    username: str = ""
    setup_time: int = 0

    def to_line(self) -> str:
        return f"{self.platform}={self.username}|{self.setup_time}"

    @classmethod
    def from_line(cls, line: str) -> "PlatformConfig":
        platform, rest = line.split("=", 1)
        username, setup_time = rest.rsplit("|", 1)
        return cls(platform.strip(), username.strip(), int(setup_time))


def _resolve(path: Optional[Union[str, Path]]) -> Path:
    if path is not None:
        return Path(path)
    return ACCOUNTS_PATH if ACCOUNTS_PATH is not None else cache.data_dir() / "accounts.txt"


def exists(path: Optional[Union[str, Path]] = None) -> bool:
    return _resolve(path).exists()


def load_accounts(path: Optional[Union[str, Path]] = None) -> Dict[str, PlatformConfig]:
    """Return ``{platform: PlatformConfig}`` ({} if the file is missing)."""

    accounts_path = _resolve(path)
    if not accounts_path.exists():
        return {}

    accounts: Dict[str, PlatformConfig] = {}
    for line in accounts_path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        try:
            entry = PlatformConfig.from_line(line)
        except ValueError:
            logger.debug("Skipping malformed account line: %r", line)
            continue
        accounts[entry.platform] = entry
    return accounts


def save_accounts(entries: Iterable[PlatformConfig], path: Optional[Union[str, Path]] = None) -> None:
    """Rewrite the whole store with *entries*."""

    accounts_path = _resolve(path)
    accounts_path.parent.mkdir(parents=True, exist_ok=True)
    accounts_path.write_text("".join(e.to_line() + "\n" for e in entries), encoding="utf-8")


def clear_accounts(path: Optional[Union[str, Path]] = None) -> None:
    """Forget every configured username.

    The file is removed so the next run starts setup again.
    """

    accounts_path = _resolve(path)
    if accounts_path.exists():
        accounts_path.unlink()
    logger.info("Cleared accounts %s", accounts_path)


def run_setup(
    platforms: Iterable[str],
    prompt: Callable[[str], str] = input,
    now: Optional[int] = None,
    path: Optional[Union[str, Path]] = None,
) -> Dict[str, PlatformConfig]:
    """Ask for a username on every platform and persist the answers.

    An empty answer keeps the current username, ``-`` clears it. Only
    platforms whose username changed get the new setup timestamp, so the
    cached ratings of untouched accounts stay valid.
    """

    now = int(time.time()) if now is None else now
    current = load_accounts(path)

    updated: Dict[str, PlatformConfig] = {}
    for platform in platforms:
        old = current.get(platform, PlatformConfig(platform))
        hint = f" [{old.username}]" if old.username else ""
        answer = prompt(f"{platform} username{hint}: ").strip()

        if not answer:
            username = old.username
        elif answer == "-":
            username = ""
        else:
            username = answer

        if username == old.username and platform in current:
            updated[platform] = old
        else:
            updated[platform] = PlatformConfig(platform, username, now)
            logger.debug("Set %s username to %r at %d", platform, username, now)

    save_accounts(updated.values(), path)
    return updated


__all__ = [
    "ACCOUNTS_PATH",
    "PlatformConfig",
    "clear_accounts",
    "exists",
    "load_accounts",
    "run_setup",
    "save_accounts",
]
