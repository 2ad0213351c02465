from typing import Optional

from arcade.models import ScoreRecord, User


class LeaderboardAggregator:
    """Read-only top-N view over score records.

    Ranking is by each user's best score, descending. Ties keep the order in
    which users first appear in the (optionally game-filtered) score history.
    """

    def __init__(self, db, size: int = 10):
        self.db = db
        self.size = size

    def get_leaderboard(self, game_id: Optional[str] = None, limit: Optional[int] = None):
        limit = self.size if limit is None else limit

        query = ScoreRecord.query
        if game_id:
            query = query.filter(ScoreRecord.game_id == game_id)

        best = {}
        for record in query.order_by(ScoreRecord.id.asc()):
            current = best.get(record.user_id)
            if current is None or record.score > current:
                best[record.user_id] = record.score

        if not best:
            return []

        users = {u.id: u for u in User.query.filter(User.id.in_(list(best))).all()}
        entries = [
            {'user': users[user_id].to_dict(), 'bestScore': score}
            for user_id, score in best.items()
            if user_id in users
        ]
        entries.sort(key=lambda entry: entry['bestScore'], reverse=True)
        return entries[:limit]
