from datetime import datetime, timezone

from arcade import db


def utcnow() -> datetime:
    """Naive UTC timestamp; all stored times are UTC without tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class LeaderboardEntry(db.Model):
    """An accepted score. Rows are append-only: created once, never updated."""
    __tablename__ = 'leaderboard'
    __table_args__ = (
        db.Index('ix_leaderboard_wallet_created_at', 'wallet_address', 'created_at'),
    )

    id = db.Column(db.Integer, primary_key=True)
    wallet_address = db.Column(db.String(42), nullable=False, index=True)  # always lowercase
    score = db.Column(db.Integer, nullable=False)
    tx_hash = db.Column(db.String(66), nullable=True)
    player_name = db.Column(db.String(50), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'wallet_address': self.wallet_address,
            'score': self.score,
            'tx_hash': self.tx_hash,
            'player_name': self.player_name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
