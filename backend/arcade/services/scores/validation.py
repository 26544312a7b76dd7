"""Input validation for score submissions.

The payload is untrusted JSON, so every field is checked explicitly. The
checks run in a fixed order and the first rejection wins; callers depend on
that order (an invalid address is reported even when the score is also bad).
"""

import re
from typing import Any, Callable, List, Mapping, NamedTuple, Optional

from .errors import (
    InvalidAddress,
    InvalidScoreType,
    InvalidTxHash,
    MalformedPayload,
    ScoreOutOfRange,
    SubmissionError,
)

WALLET_ADDRESS_RE = re.compile(r'0x[a-fA-F0-9]{40}')
TX_HASH_RE = re.compile(r'0x[a-fA-F0-9]{64}')


class ScoreSubmission(NamedTuple):
    wallet_address: str
    score: int
    tx_hash: Optional[str] = None
    player_name: Optional[str] = None


class ScoreRange(NamedTuple):
    min_score: int
    max_score: int


Check = Callable[[Mapping[str, Any], ScoreRange], Optional[SubmissionError]]


def _is_integral(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a score
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    # 500.0 arrives as float from some JSON encoders
    return isinstance(value, float) and value.is_integer()


def check_wallet_address(payload, bounds):
    address = payload.get('wallet_address')
    if not address or not isinstance(address, str):
        return InvalidAddress('Valid wallet address is required')
    if not WALLET_ADDRESS_RE.fullmatch(address):
        return InvalidAddress('Invalid wallet address format')
    return None


def check_score_type(payload, bounds):
    if not _is_integral(payload.get('score')):
        return InvalidScoreType()
    return None


def check_score_range(payload, bounds):
    score = int(payload['score'])
    if score < bounds.min_score or score > bounds.max_score:
        return ScoreOutOfRange(f'Score must be between {bounds.min_score} and {bounds.max_score}')
    return None


def check_tx_hash(payload, bounds):
    tx_hash = payload.get('tx_hash')
    if tx_hash is None or tx_hash == '':
        return None
    if not isinstance(tx_hash, str) or not TX_HASH_RE.fullmatch(tx_hash):
        return InvalidTxHash()
    return None


# Order matters: address, score type, score range, tx hash
CHECKS: List[Check] = [
    check_wallet_address,
    check_score_type,
    check_score_range,
    check_tx_hash,
]


def first_rejection(payload: Mapping[str, Any], bounds: ScoreRange) -> Optional[SubmissionError]:
    """Run the checks in order and return the first rejection, or None."""
    for check in CHECKS:
        rejection = check(payload, bounds)
        if rejection is not None:
            return rejection
    return None


def validate_submission(payload: Any, bounds: ScoreRange) -> ScoreSubmission:
    """Validate a raw payload and return a typed submission.

    Raises the specific ``SubmissionError`` for the first failing check, or
    ``MalformedPayload`` when the payload is not a JSON object at all.
    Pure: no storage access, no normalization beyond typing.
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayload()

    rejection = first_rejection(payload, bounds)
    if rejection is not None:
        raise rejection

    player_name = payload.get('player_name')
    return ScoreSubmission(
        wallet_address=payload['wallet_address'],
        score=int(payload['score']),
        tx_hash=payload.get('tx_hash') or None,
        player_name=player_name if isinstance(player_name, str) and player_name else None,
    )
