"""Bearer-token authentication on top of Flask-Login.

Requests carry ``Authorization: Bearer <token>``. The request loader resolves
the token through the app's CredentialStore so ``login_required`` and
``current_user`` work as usual. A missing token answers 401; a token that
fails verification answers 403 with a generic message, while the precise
reason is only logged.
"""

from functools import wraps

from flask import current_app, g
from flask_login import current_user

from arcade import db, login_manager
from arcade.errors import AuthenticationRequired, Forbidden, InvalidToken
from arcade.services.accounts import get_accounts

BEARER_PREFIX = 'bearer '


def bearer_token(request):
    header = request.headers.get('Authorization', '')
    if not header.lower().startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


@login_manager.request_loader
def load_user_from_request(request):
    token = bearer_token(request)
    if not token:
        return None
    try:
        return get_accounts().credentials.resolve_bearer(token)
    except InvalidToken as exc:
        current_app.logger.info(f"[token-reject] reason={exc.reason} path={request.path}")
        g.token_error = exc
        return None


@login_manager.user_loader
def load_user(user_id):
    from arcade.models import User
    return db.session.get(User, user_id)


@login_manager.unauthorized_handler
def unauthorized():
    token_error = g.pop('token_error', None)
    if token_error is not None:
        raise token_error
    raise AuthenticationRequired()


def admin_required(view):
    """Use under ``login_required``; rejects authenticated non-admins."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        if not current_user.is_admin:
            raise Forbidden()
        return view(*args, **kwargs)
    return wrapper
