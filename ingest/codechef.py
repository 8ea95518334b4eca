"""CodeChef rating scraping.

CodeChef does not offer a public rating API, so the rating is read from the
``div.rating-number`` element of the user's profile page. The site sits
behind Cloudflare, hence the request goes through a cloudscraper session
rather than plain ``requests``.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import cloudscraper
import requests
from bs4 import BeautifulSoup
from cloudscraper.exceptions import CloudflareException

logger = logging.getLogger(__name__)

_PROFILE_URL = "https://www.codechef.com/users/{username}"

PLATFORM = "CodeChef"

# Single scraper instance (handles Cloudflare automatically)
scraper = cloudscraper.create_scraper()


def parse_rating(html: str) -> Optional[int]:
    """Return the rating from a CodeChef profile page (or None)."""

    soup = BeautifulSoup(html, "lxml")
    node = soup.select_one("div.rating-number")
    if node is None:
        return None
    # Provisional ratings are rendered with a trailing "?"
    m = re.search(r"\d+", node.get_text(strip=True))
    return int(m.group()) if m else None


def fetch_rating(username: str) -> Optional[int]:
    """Fetch the current CodeChef rating for *username*."""

    if not username.strip():
        return None

    url = _PROFILE_URL.format(username=username.strip())
    try:
        logger.debug("Requesting %s", url)
        resp = scraper.get(url, timeout=15)
        if resp.status_code != 200:
            logger.info("CodeChef profile for %s returned %s", username, resp.status_code)
            return None
        rating = parse_rating(resp.text)
    except (requests.RequestException, CloudflareException) as exc:
        logger.info("CodeChef fetch failed for %s: %s", username, exc)
        return None

    if rating is None:
        logger.info("No CodeChef rating found for %s", username)
    return rating


__all__ = ["PLATFORM", "fetch_rating", "parse_rating"]
