from typing import Optional

MAX_PLAYER_NAME_LENGTH = 50
UNSAFE_CHARACTERS = '<>"\'&'

_STRIP_UNSAFE = str.maketrans('', '', UNSAFE_CHARACTERS)


def sanitize_player_name(name: Optional[str]) -> Optional[str]:
    """Trim, cap at 50 characters, then drop markup/quote characters.

    Never fails; the worst case is an empty string. Applying it twice gives
    the same result as applying it once.
    """
    if name is None:
        return None
    cleaned = name.strip()[:MAX_PLAYER_NAME_LENGTH]
    # Removing characters can expose edge whitespace ("< bob"), trim once more
    return cleaned.translate(_STRIP_UNSAFE).strip()
