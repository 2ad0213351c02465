from arcade import db
from flask_login import UserMixin
from datetime import datetime, timezone
import uuid

GAME_CATEGORIES = (
    'action',
    'adventure',
    'puzzle',
    'sports',
    'racing',
    'strategy',
    'arcade',
    'casual',
    'multiplayer',
    'io',
)


def utcnow():
    return datetime.now(timezone.utc)


def generate_user_id():
    return f"user_{uuid.uuid4().hex}"


def generate_game_id():
    return str(uuid.uuid4())


def _isoformat(value):
    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat() + 'Z'
    return value.isoformat()


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.String(64), primary_key=True, default=generate_user_id)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    avatar = db.Column(db.String(512), nullable=True)
    level = db.Column(db.Integer, nullable=False, default=1)
    experience = db.Column(db.Integer, nullable=False, default=0)
    coins = db.Column(db.Integer, nullable=False, default=100)
    achievements = db.Column(db.JSON, nullable=False, default=lambda: ['first_login'])
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    last_login = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    scores = db.relationship('ScoreRecord', back_populates='user', lazy='dynamic')

    def to_dict(self):
        """Public projection: everything except the password hash."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'avatar': self.avatar,
            'level': self.level,
            'experience': self.experience,
            'coins': self.coins,
            'achievements': list(self.achievements or []),
            'createdAt': _isoformat(self.created_at),
            'lastLogin': _isoformat(self.last_login),
            'isAdmin': self.is_admin,
        }


class ScoreRecord(db.Model):
    __tablename__ = 'score_record'
    # Autoincrement id doubles as insertion order for leaderboard tie-breaks
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), db.ForeignKey('user.id'), nullable=False, index=True)
    game_id = db.Column(db.String(128), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    play_time = db.Column(db.Integer, nullable=False, default=0)  # milliseconds
    completed_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    user = db.relationship('User', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'gameId': self.game_id,
            'score': self.score,
            'playTime': self.play_time,
            'completedAt': _isoformat(self.completed_at),
        }


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.String(64), primary_key=True, default=generate_game_id)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    thumbnail = db.Column(db.String(1024), nullable=False)
    game_url = db.Column(db.String(1024), nullable=False)
    game_file = db.Column(db.String(255), nullable=True)
    is_embedded = db.Column(db.Boolean, nullable=False, default=True)
    category = db.Column(db.String(32), nullable=False, index=True)
    plays = db.Column(db.Integer, nullable=False, default=0)
    rating = db.Column(db.Integer, nullable=False, default=40)  # 45 == 4.5 stars
    is_new = db.Column(db.Boolean, nullable=False, default=False)
    is_trending = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'thumbnail': self.thumbnail,
            'gameUrl': self.game_url,
            'gameFile': self.game_file,
            'isEmbedded': self.is_embedded,
            'category': self.category,
            'plays': self.plays,
            'rating': self.rating,
            'isNew': self.is_new,
            'isTrending': self.is_trending,
            'createdAt': _isoformat(self.created_at),
        }
