from flask import current_app
from sqlalchemy import func, or_

from arcade import db
from arcade.errors import NotFound, ValidationError
from arcade.models import GAME_CATEGORIES, Game

# Wire name -> column name
EDITABLE_FIELDS = {
    'title': 'title',
    'description': 'description',
    'thumbnail': 'thumbnail',
    'gameUrl': 'game_url',
    'gameFile': 'game_file',
    'isEmbedded': 'is_embedded',
    'category': 'category',
    'rating': 'rating',
    'isNew': 'is_new',
    'isTrending': 'is_trending',
}
REQUIRED_FIELDS = ('title', 'description', 'thumbnail', 'gameUrl', 'category')
BOOLEAN_FIELDS = {'isEmbedded', 'isNew', 'isTrending'}


def _clean_fields(data, partial):
    if not isinstance(data, dict):
        raise ValidationError('Invalid game data')
    unknown = set(data) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
    if not partial:
        missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    cleaned = {}
    for name, value in data.items():
        if name in REQUIRED_FIELDS and (not isinstance(value, str) or not value.strip()):
            raise ValidationError(f'{name} must be a non-empty string')
        if name in BOOLEAN_FIELDS and not isinstance(value, bool):
            raise ValidationError(f'{name} must be a boolean')
        if name == 'rating' and (isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 50):
            raise ValidationError('rating must be an integer between 0 and 50')
        if name == 'gameFile' and value is not None and not isinstance(value, str):
            raise ValidationError('gameFile must be a string')
        cleaned[EDITABLE_FIELDS[name]] = value.strip() if name in REQUIRED_FIELDS else value

    if 'category' in cleaned and cleaned['category'] not in GAME_CATEGORIES:
        raise ValidationError(f"category must be one of: {', '.join(GAME_CATEGORIES)}")
    return cleaned


def list_games():
    return Game.query.order_by(Game.plays.desc()).all()


def games_by_category(category):
    return Game.query.filter_by(category=category).order_by(Game.plays.desc()).all()


def trending_games():
    return Game.query.filter_by(is_trending=True).order_by(Game.plays.desc()).all()


def new_games():
    return Game.query.filter_by(is_new=True).order_by(Game.created_at.desc()).all()


def search_games(query):
    """Case-insensitive substring match on title, description or category.

    ``%`` and ``_`` in the query match literally.
    """
    needle = query.strip().lower()
    return (
        Game.query.filter(
            or_(
                func.lower(Game.title).contains(needle, autoescape=True),
                func.lower(Game.description).contains(needle, autoescape=True),
                func.lower(Game.category).contains(needle, autoescape=True),
            )
        )
        .order_by(Game.plays.desc())
        .all()
    )


def get_game(game_id):
    game = db.session.get(Game, game_id)
    if not game:
        raise NotFound('Game not found')
    return game


def create_game(data):
    fields = _clean_fields(data, partial=False)
    fields.setdefault('rating', 40)
    fields.setdefault('is_new', False)
    fields.setdefault('is_trending', False)
    game = Game(**fields)
    db.session.add(game)
    db.session.commit()
    current_app.logger.info(f"[catalog-create] game={game.id} title={game.title}")
    return game


def update_game(game_id, data):
    game = get_game(game_id)
    for column, value in _clean_fields(data, partial=True).items():
        setattr(game, column, value)
    db.session.commit()
    current_app.logger.info(f"[catalog-update] game={game.id}")
    return game


def delete_game(game_id):
    game = get_game(game_id)
    db.session.delete(game)
    db.session.commit()
    current_app.logger.info(f"[catalog-delete] game={game_id}")


def increment_plays(game_id):
    game = get_game(game_id)
    game.plays += 1
    db.session.commit()
    return game
