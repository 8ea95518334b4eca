from .report import format_rating, print_rating

__all__ = ["format_rating", "print_rating"]
