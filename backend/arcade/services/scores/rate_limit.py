"""Per-wallet sliding-window submission quota.

The window is ``now - window_sec`` recomputed on every check, so there is no
bucket boundary to time submissions against. The count and the later insert
are separate statements: two concurrent submissions from one wallet can both
see ``limit - 1`` rows and both be accepted. The limiter is a throttle, not a
transactional cap, and that overshoot of one is accepted.
"""

from datetime import datetime, timedelta
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from arcade import db
from arcade.models import LeaderboardEntry, utcnow
from .errors import RateLimitCheckFailed, RateLimitExceeded


def window_start(now: datetime, window_sec: int) -> datetime:
    return now - timedelta(seconds=window_sec)


def count_recent_submissions(wallet_address: str, since: datetime) -> int:
    """Number of entries for ``wallet_address`` created at or after ``since``.

    Raises ``RateLimitCheckFailed`` when the store cannot answer.
    """
    try:
        return (
            LeaderboardEntry.query
            .filter(LeaderboardEntry.wallet_address == wallet_address)
            .filter(LeaderboardEntry.created_at >= since)
            .count()
        )
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[rate-limit-error] wallet={wallet_address} since={since.isoformat()} error={exc!r}")
        raise RateLimitCheckFailed() from exc


def check_rate_limit(
    wallet_address: str,
    now: Optional[datetime] = None,
    window_sec: Optional[int] = None,
    max_submissions: Optional[int] = None,
) -> int:
    """Reject the wallet when it already has ``max_submissions`` in the window.

    ``wallet_address`` must already be lowercase. Returns the count seen so
    callers can log it.
    """
    cfg = current_app.config
    if now is None:
        now = utcnow()
    if window_sec is None:
        window_sec = int(cfg.get('RATE_LIMIT_WINDOW_SEC', 3600))
    if max_submissions is None:
        max_submissions = int(cfg.get('MAX_SUBMISSIONS_PER_WINDOW', 10))

    count = count_recent_submissions(wallet_address, window_start(now, window_sec))
    if count >= max_submissions:
        current_app.logger.warning(
            f"[rate-limit] wallet={wallet_address} count={count} limit={max_submissions} window={window_sec}s"
        )
        raise RateLimitExceeded(
            f'Rate limit exceeded. Maximum {max_submissions} submissions per {_describe_window(window_sec)}.'
        )
    return count


def _describe_window(window_sec: int) -> str:
    if window_sec == 3600:
        return 'hour'
    if window_sec % 3600 == 0:
        return f'{window_sec // 3600} hours'
    if window_sec % 60 == 0:
        return f'{window_sec // 60} minutes'
    return f'{window_sec} seconds'
