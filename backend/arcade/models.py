from arcade import db


class LeaderboardEntry(db.Model):
    __tablename__ = 'leaderboard_entries'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    game = db.Column(db.String(32), nullable=False)
    name = db.Column(db.String(12), nullable=False)
    score = db.Column(db.BigInteger, nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp(), nullable=False)

    @classmethod
    def ranked(cls, game):
        """Query for one game's entries in leaderboard order.

        Score descending, then earliest submission first. ``created_at`` has
        one-second resolution so ``id`` settles ties within the same second.
        """
        return cls.query.filter_by(game=game).order_by(
            cls.score.desc(), cls.created_at.asc(), cls.id.asc()
        )

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
            'created_at': _format_timestamp(self.created_at),
        }

    def to_entry_dict(self):
        payload = self.to_dict()
        payload['id'] = self.id
        payload['game'] = self.game
        return payload


db.Index('idx_leaderboard_game_score', LeaderboardEntry.game, LeaderboardEntry.score.desc())


def _format_timestamp(value):
    # Same shape SQLite's CURRENT_TIMESTAMP renders: 'YYYY-MM-DD HH:MM:SS' (UTC)
    if value is None:
        return None
    return value.strftime('%Y-%m-%d %H:%M:%S')
