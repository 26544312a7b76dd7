from datetime import datetime
from typing import Any, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from arcade import db
from arcade.models import LeaderboardEntry, utcnow
from .errors import PersistenceFailed, SubmissionError
from .rate_limit import check_rate_limit
from .sanitize import sanitize_player_name
from .validation import ScoreRange, validate_submission


def configured_score_range() -> ScoreRange:
    cfg = current_app.config
    return ScoreRange(int(cfg['MIN_VALID_SCORE']), int(cfg['MAX_VALID_SCORE']))


def persist_entry(
    wallet_address: str,
    score: int,
    tx_hash: Optional[str],
    player_name: Optional[str],
    created_at: Optional[datetime] = None,
) -> LeaderboardEntry:
    """Insert a new leaderboard row. Always an insert, never an upsert.

    ``created_at`` defaults to the current UTC time.
    """
    entry = LeaderboardEntry(
        wallet_address=wallet_address,
        score=score,
        tx_hash=tx_hash,
        player_name=player_name,
        created_at=created_at or utcnow(),
    )
    try:
        db.session.add(entry)
        db.session.commit()
    except SQLAlchemyError as exc:
        # Nothing half-written survives a failed commit
        db.session.rollback()
        current_app.logger.error(
            f"[score-persist-error] wallet={wallet_address} score={score} tx_hash={tx_hash} error={exc!r}"
        )
        raise PersistenceFailed() from exc
    return entry


def submit_score(payload: Any, now: Optional[datetime] = None) -> LeaderboardEntry:
    """Run the full pipeline for one submission and return the stored entry.

    validate -> lowercase wallet -> rate limit -> sanitize name -> insert.
    Any stage may raise a ``SubmissionError``; no row is written unless every
    stage before the insert passed.
    ``now`` is the single clock for the request: it anchors the rate-limit
    window and becomes the entry's ``created_at``.
    """
    if isinstance(payload, dict):
        current_app.logger.info(
            f"[score-submit] wallet={payload.get('wallet_address')} score={payload.get('score')} tx_hash={payload.get('tx_hash')}"
        )

    try:
        submission = validate_submission(payload, configured_score_range())
        wallet_address = submission.wallet_address.lower()
        if now is None:
            now = utcnow()
        check_rate_limit(wallet_address, now=now)
        player_name = sanitize_player_name(submission.player_name)
        entry = persist_entry(wallet_address, submission.score, submission.tx_hash, player_name, created_at=now)
    except SubmissionError as exc:
        if exc.status_code >= 500:
            current_app.logger.error(f"[score-reject] kind={exc.kind} status={exc.status_code} payload={payload!r}")
        else:
            current_app.logger.warning(f"[score-reject] kind={exc.kind} status={exc.status_code} reason={exc.message}")
        raise

    current_app.logger.info(f"[score-accepted] id={entry.id} wallet={entry.wallet_address} score={entry.score}")

    from arcade.socketio_events import broadcast_leaderboard_update
    broadcast_leaderboard_update(entry)
    return entry
