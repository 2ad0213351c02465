"""Game catalog services: listing, filtering, search and admin mutations."""

from .games import (
    create_game,
    delete_game,
    games_by_category,
    get_game,
    increment_plays,
    list_games,
    new_games,
    search_games,
    trending_games,
    update_game,
)
from .seed import seed_catalog

__all__ = [
    'create_game',
    'delete_game',
    'games_by_category',
    'get_game',
    'increment_plays',
    'list_games',
    'new_games',
    'search_games',
    'seed_catalog',
    'trending_games',
    'update_game',
]
