from flask import Blueprint, jsonify
from flask_login import login_required
from arcade.api import json_body
from arcade.security import admin_required
from arcade.services.accounts import get_accounts

admin = Blueprint('admin', __name__)

# camelCase wire names accepted on top of the store's own field names
WIRE_FIELDS = {'isAdmin': 'is_admin'}


@admin.route('/users', methods=['GET'])
@login_required
@admin_required
def list_users():
    users = get_accounts().credentials.list_users()
    return jsonify([u.to_dict() for u in users])


@admin.route('/users/<string:user_id>', methods=['PATCH'])
@login_required
@admin_required
def update_user(user_id):
    data = json_body()
    updates = {WIRE_FIELDS.get(name, name): value for name, value in data.items()}
    user = get_accounts().credentials.update_user(user_id, updates)
    return jsonify(user.to_dict())
