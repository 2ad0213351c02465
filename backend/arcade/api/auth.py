from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from arcade.api import json_body
from arcade.errors import ValidationError
from arcade.services.accounts import get_accounts

auth = Blueprint('auth', __name__)

# Fields a user may change on their own profile
PROFILE_FIELDS = ('username', 'email', 'avatar')


@auth.route('/register', methods=['POST'])
def register():
    """
    Creates an account. The client logs in separately afterwards.
    """
    data = json_body()
    user = get_accounts().credentials.register(
        data.get('username'),
        data.get('email'),
        data.get('password'),
    )
    return jsonify({'success': True, 'user': user.to_dict()}), 201


@auth.route('/login', methods=['POST'])
def login():
    """
    Accepts a username or email plus password and returns a bearer token.
    """
    data = json_body()
    identifier = data.get('identifier') or data.get('username') or data.get('email')
    user, token = get_accounts().credentials.login(identifier, data.get('password'))
    return jsonify({'token': token, 'user': user.to_dict()})


@auth.route('/profile', methods=['GET'])
@login_required
def get_profile():
    return jsonify(current_user.to_dict())


@auth.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    data = json_body()
    rejected = set(data) - set(PROFILE_FIELDS)
    if rejected:
        raise ValidationError(f"Fields cannot be changed here: {', '.join(sorted(rejected))}")
    # Empty strings from the profile form mean "leave unchanged"
    updates = {name: value for name, value in data.items() if value != ''}
    user = get_accounts().credentials.update_user(current_user.id, updates)
    return jsonify(user.to_dict())


@auth.route('/password', methods=['POST'])
@login_required
def change_password():
    data = json_body()
    get_accounts().credentials.change_password(
        current_user.id,
        data.get('currentPassword'),
        data.get('newPassword'),
    )
    return jsonify({'success': True})
