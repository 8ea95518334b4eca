"""Module for scraping a user's AtCoder rating from their profile page."""

from __future__ import annotations

from typing import Optional

import requests
import logging
import re
from bs4 import BeautifulSoup


ATCODER_USER_URL = "https://atcoder.jp/users/{username}"

PLATFORM = "AtCoder"

logger = logging.getLogger(__name__)


def parse_rating(html: str) -> Optional[int]:
    """Return the rating shown in the profile's ``dl-table`` (or None)."""
    soup = BeautifulSoup(html, "lxml")
    for table in soup.find_all("table", class_="dl-table"):
        for row in table.find_all("tr"):
            header = row.find("th")
            cell = row.find("td")
            if header is None or cell is None:
                continue
            if header.get_text(strip=True) != "Rating":
                continue
            # Cell reads e.g. "1834 (Provisional)"; first integer is the rating
            m = re.search(r"\d+", cell.get_text(" ", strip=True))
            return int(m.group()) if m else None
    return None


def fetch_rating(username: str) -> Optional[int]:
    """Fetch the current AtCoder rating for *username*.

    Parameters
    ----------
    username : str
        AtCoder user name. Blank names are skipped without a request.

    Returns
    -------
    Optional[int]
        The rating, or None when the page has none or the request failed.
    """
    if not username.strip():
        return None

    url = ATCODER_USER_URL.format(username=username.strip())
    try:
        headers = {"User-Agent": "Mozilla/5.0 (compatible; cp-ratings/0.1)"}
        logger.debug("Requesting %s", url)
        resp = requests.get(url, params={"lang": "en"}, timeout=15, headers=headers)
        logger.debug("AtCoder response status %s", resp.status_code)
        resp.raise_for_status()
        rating = parse_rating(resp.text)
    except requests.RequestException as exc:
        logger.info("AtCoder fetch failed for %s: %s", username, exc)
        return None

    if rating is None:
        logger.info("No AtCoder rating found for %s", username)
    return rating


__all__ = ["PLATFORM", "fetch_rating", "parse_rating"]
