from flask import Blueprint, jsonify, request
from flask_login import login_required
from arcade.api import json_body
from arcade.errors import ValidationError
from arcade.security import admin_required
from arcade.services import catalog

games = Blueprint('games', __name__)


@games.route('', methods=['GET'])
def list_games():
    return jsonify([g.to_dict() for g in catalog.list_games()])


@games.route('/category/<string:category>', methods=['GET'])
def games_by_category(category):
    return jsonify([g.to_dict() for g in catalog.games_by_category(category)])


@games.route('/trending', methods=['GET'])
def trending_games():
    return jsonify([g.to_dict() for g in catalog.trending_games()])


@games.route('/new', methods=['GET'])
def new_games():
    return jsonify([g.to_dict() for g in catalog.new_games()])


@games.route('/search', methods=['GET'])
def search_games():
    query = (request.args.get('q') or '').strip()
    if not query:
        raise ValidationError('Search query is required')
    return jsonify([g.to_dict() for g in catalog.search_games(query)])


@games.route('/<string:game_id>', methods=['GET'])
def get_game(game_id):
    return jsonify(catalog.get_game(game_id).to_dict())


@games.route('/<string:game_id>/play', methods=['POST'])
def play_game(game_id):
    """
    Bumps the play counter when a game is opened.
    """
    game = catalog.increment_plays(game_id)
    return jsonify({'message': 'Play count incremented', 'plays': game.plays})


@games.route('', methods=['POST'])
@login_required
@admin_required
def create_game():
    game = catalog.create_game(json_body())
    return jsonify(game.to_dict()), 201


@games.route('/<string:game_id>', methods=['PUT'])
@login_required
@admin_required
def update_game(game_id):
    game = catalog.update_game(game_id, json_body())
    return jsonify(game.to_dict())


@games.route('/<string:game_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_game(game_id):
    catalog.delete_game(game_id)
    return jsonify({'message': 'Game deleted successfully'})
