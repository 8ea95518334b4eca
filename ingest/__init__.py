from . import atcoder, codechef, codeforces
from .codeforces import fetch_rating as fetch_codeforces
from .codechef import fetch_rating as fetch_codechef
from .atcoder import fetch_rating as fetch_atcoder

# Display order of the platforms; also the order setup prompts for them
FETCHERS = {
    codeforces.PLATFORM: fetch_codeforces,
    codechef.PLATFORM: fetch_codechef,
    atcoder.PLATFORM: fetch_atcoder,
}

PLATFORMS = list(FETCHERS)

__all__ = [
    "FETCHERS",
    "PLATFORMS",
    "fetch_atcoder",
    "fetch_codechef",
    "fetch_codeforces",
]
