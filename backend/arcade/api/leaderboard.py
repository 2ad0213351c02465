from flask import Blueprint, jsonify, request
from arcade.services.accounts import get_accounts

leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('', methods=['GET'])
def global_leaderboard():
    """
    Top players by best score; ``?gameId=`` narrows it to one game.
    """
    game_id = request.args.get('gameId') or None
    return jsonify(get_accounts().leaderboard.get_leaderboard(game_id))


@leaderboard.route('/<string:game_id>', methods=['GET'])
def game_leaderboard(game_id):
    return jsonify(get_accounts().leaderboard.get_leaderboard(game_id))
