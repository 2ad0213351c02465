from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from arcade.api import json_body
from arcade.services.accounts import get_accounts
from arcade.socketio_events import broadcast_leaderboard_update

scores = Blueprint('scores', __name__)


@scores.route('', methods=['POST'])
@login_required
def submit_score():
    """
    Records a finished play for the current user and applies progression.
    """
    data = json_body()
    accounts = get_accounts()
    record = accounts.ledger.add_score(
        current_user.id,
        data.get('gameId'),
        data.get('score'),
        data.get('playTime', 0),
    )
    broadcast_leaderboard_update(record.game_id)
    user = accounts.credentials.get_user(current_user.id)
    return jsonify({'score': record.to_dict(), 'user': user.to_dict()}), 201


@scores.route('/my', methods=['GET'])
@login_required
def my_scores():
    records = get_accounts().ledger.get_user_scores(current_user.id)
    records.sort(key=lambda r: (r.completed_at, r.id), reverse=True)
    return jsonify([r.to_dict() for r in records])
