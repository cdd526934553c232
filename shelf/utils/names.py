# shelf/utils/names.py
from typing import Tuple

def split_author_name(full_name: str) -> Tuple[str, str]:
    """Split a free-text author name into (first name, surname).

    The first whitespace-separated token is the first name. The remaining
    tokens are joined with no separator, so "Ursula K. Le Guin" gives
    ("Ursula", "K.LeGuin"). Single-token and empty names get an empty
    surname.
    """
    tokens = (full_name or '').split()
    if not tokens:
        return '', ''
    return tokens[0], ''.join(tokens[1:])
