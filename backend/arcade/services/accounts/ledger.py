from flask import current_app

from arcade.errors import NotFound, ValidationError
from arcade.models import ScoreRecord, User
from .progression import (
    MAX_INT,
    coins_for_score,
    earned_achievements,
    experience_for_score,
    level_for_experience,
    level_up_bonus,
    merge_achievements,
)


def _require_non_negative_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f'{name} must be a non-negative integer')
    if value > MAX_INT:
        raise ValidationError(f'{name} must be at most {MAX_INT}')


class ScoreLedger:
    """Appends immutable score records and applies account progression.

    The record insert and the user's experience/coins/level/achievement update
    are committed together, with the user row locked for the duration.
    """

    def __init__(self, db):
        self.db = db

    def add_score(self, user_id, game_id, score, play_time):
        if not isinstance(game_id, str) or not game_id.strip():
            raise ValidationError('gameId is required')
        _require_non_negative_int('score', score)
        _require_non_negative_int('playTime', play_time)

        user = self.db.session.get(User, user_id, with_for_update=True)
        if not user:
            raise NotFound('User not found')

        first_game = user.scores.count() == 0
        record = ScoreRecord(user_id=user.id, game_id=game_id.strip(), score=score, play_time=play_time)
        self.db.session.add(record)

        old_level = user.level
        user.experience += experience_for_score(score)
        user.coins += coins_for_score(score)
        new_level = level_for_experience(user.experience)
        bonus = level_up_bonus(old_level, new_level)
        user.level = new_level
        user.coins += bonus
        if user.experience > MAX_INT or user.coins > MAX_INT:
            self.db.session.rollback()
            raise ValidationError('score would overflow experience or coins')
        user.achievements = merge_achievements(user.achievements, earned_achievements(new_level, first_game))

        try:
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise

        current_app.logger.info(
            f"[score-add] user={user.id} game={record.game_id} score={score} "
            f"level={old_level}->{new_level} bonus={bonus}"
        )
        return record

    def get_user_scores(self, user_id):
        return ScoreRecord.query.filter_by(user_id=user_id).all()
