"""
Module for pulling a single user's Codeforces rating.
"""

from typing import Dict, Optional
import requests
import logging

logger = logging.getLogger(__name__)

# Base URL for Codeforces API
CODEFORCES_API_URL = "https://codeforces.com/api"

PLATFORM = "Codeforces"


def parse_rating(payload: Dict) -> Optional[int]:
    """Extract the rating from a ``user.info`` response body.

    Unrated users have no ``rating`` field, in which case *None* is returned.
    """
    if not isinstance(payload, dict) or payload.get("status") != "OK":
        return None
    result = payload.get("result") or []
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        return None
    rating = result[0].get("rating")
    return int(rating) if rating is not None else None


# Docs: https://codeforces.com/apiHelp/methods#user.info

def fetch_rating(username: str) -> Optional[int]:
    """Fetch the current Codeforces rating for *username*.

    Parameters
    ----------
    username : str
        Codeforces handle. Blank handles are skipped without a request.

    Returns
    -------
    Optional[int]
        The rating, or None when the user is unrated or the request failed.
    """
    if not username.strip():
        return None

    endpoint = f"{CODEFORCES_API_URL}/user.info"

    try:
        logger.debug("Requesting %s for %s", endpoint, username)
        resp = requests.get(endpoint, params={"handles": username.strip()}, timeout=15)
        logger.debug("Codeforces response status %s", resp.status_code)
        resp.raise_for_status()
        rating = parse_rating(resp.json())
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        logger.info("Codeforces fetch failed for %s: %s", username, exc)
        return None

    if rating is None:
        logger.info("No Codeforces rating found for %s", username)
    return rating


__all__ = ["PLATFORM", "fetch_rating", "parse_rating"]
