"""Report module: renders ratings for the terminal."""

from typing import Optional


def format_rating(platform: str, rating: int, numbers_only: bool = False) -> str:
    """Return the output line for one platform's *rating*.

    Parameters
    ----------
    platform : str
        Platform display name, e.g. ``"Codeforces"``.
    rating : int
        Rating value to show.
    numbers_only : bool, optional
        Print the bare number instead of the annotated text, by default False.
    """
    if numbers_only:
        return str(rating)
    return f"{platform} rating: {rating}"


def print_rating(platform: str, rating: Optional[int], numbers_only: bool = False) -> None:
    """Print *rating* unless it is missing."""
    if rating is None:
        return
    print(format_rating(platform, rating, numbers_only))


__all__ = ["format_rating", "print_rating"]
