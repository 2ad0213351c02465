from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from arcade.errors import (
    DuplicateIdentity,
    InvalidCredentials,
    InvalidToken,
    NotFound,
    ValidationError,
)
from arcade.models import User, utcnow
from .progression import MAX_INT, level_for_experience

MIN_PASSWORD_LENGTH = 6
MAX_USERNAME_LENGTH = 64
# bcrypt only hashes the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72

# Fields update_user may merge. Credentials go through change_password only.
UPDATABLE_FIELDS = {'username', 'email', 'avatar', 'coins', 'experience', 'achievements', 'is_admin'}
CREDENTIAL_FIELDS = {'password', 'password_hash'}


def _clean_username(username):
    if not isinstance(username, str) or not username.strip():
        raise ValidationError('Username is required')
    username = username.strip()
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(f'Username must be at most {MAX_USERNAME_LENGTH} characters')
    return username


def _clean_email(email):
    if not isinstance(email, str) or '@' not in email.strip():
        raise ValidationError('A valid email is required')
    return email.strip()


def _check_password_shape(password):
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValidationError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes')


def _non_negative_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f'{name} must be a non-negative integer')
    if value > MAX_INT:
        raise ValidationError(f'{name} must be at most {MAX_INT}')
    return value


class CredentialStore:
    """Owns user records: registration, login, token resolution, updates.

    Uniqueness of username and email is an exact, case-sensitive match.
    """

    def __init__(self, db, bcrypt, issuer):
        self.db = db
        self.bcrypt = bcrypt
        self.issuer = issuer

    def _hash(self, password):
        return self.bcrypt.generate_password_hash(password).decode('utf-8')

    def _identity_taken(self, username=None, email=None, exclude_id=None):
        clauses = []
        if username is not None:
            clauses.append(User.username == username)
        if email is not None:
            clauses.append(User.email == email)
        if not clauses:
            return False
        query = User.query.filter(or_(*clauses))
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def _commit_identity_change(self):
        try:
            self.db.session.commit()
        except IntegrityError:
            self.db.session.rollback()
            raise DuplicateIdentity()

    def register(self, username, email, password):
        username = _clean_username(username)
        email = _clean_email(email)
        _check_password_shape(password)

        if self._identity_taken(username=username, email=email):
            current_app.logger.info(f"[auth-register] username={username} rejected: duplicate")
            raise DuplicateIdentity()

        user = User(
            username=username,
            email=email,
            password_hash=self._hash(password),
            level=1,
            experience=0,
            coins=100,
            achievements=['first_login'],
            is_admin=False,
        )
        self.db.session.add(user)
        self._commit_identity_change()
        current_app.logger.info(f"[auth-register] user={user.id} username={username}")
        return user

    def login(self, identifier, password):
        """Return ``(user, token)`` for a matching username or email."""
        if not isinstance(identifier, str) or not identifier:
            raise ValidationError('Username or email is required')
        if not isinstance(password, str) or not password:
            raise ValidationError('Password is required')
        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise InvalidCredentials()

        user = User.query.filter(or_(User.username == identifier, User.email == identifier)).first()
        if not user or not self.bcrypt.check_password_hash(user.password_hash, password):
            current_app.logger.info(f"[auth-login] identifier={identifier} failed")
            raise InvalidCredentials()

        user.last_login = utcnow()
        self.db.session.commit()
        token = self.issuer.issue(user.id)
        current_app.logger.info(f"[auth-login] user={user.id} ok")
        return user, token

    def verify_token(self, token):
        user_id = self.issuer.verify(token)
        user = self.db.session.get(User, user_id)
        if not user:
            raise NotFound('User not found')
        return user

    def resolve_bearer(self, token):
        """verify_token collapsed to the boundary kind: unknown users become InvalidToken."""
        try:
            return self.verify_token(token)
        except NotFound:
            raise InvalidToken('user_not_found')

    def get_user(self, user_id):
        user = self.db.session.get(User, user_id)
        if not user:
            raise NotFound('User not found')
        return user

    def list_users(self):
        return User.query.order_by(User.created_at.asc(), User.id.asc()).all()

    def update_user(self, user_id, fields):
        if not isinstance(fields, dict):
            raise ValidationError('Update must be an object')
        credential_keys = CREDENTIAL_FIELDS & set(fields)
        if credential_keys:
            raise ValidationError('Use the password change operation to update credentials')
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        user = self.get_user(user_id)
        changes = dict(fields)
        if 'username' in changes:
            changes['username'] = _clean_username(changes['username'])
        if 'email' in changes:
            changes['email'] = _clean_email(changes['email'])
        if self._identity_taken(changes.get('username'), changes.get('email'), exclude_id=user.id):
            raise DuplicateIdentity()
        for name in ('coins', 'experience'):
            if name in changes:
                _non_negative_int(name, changes[name])
        if 'achievements' in changes:
            tags = changes['achievements']
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                raise ValidationError('achievements must be a list of strings')
            changes['achievements'] = list(dict.fromkeys(tags))
        if 'is_admin' in changes and not isinstance(changes['is_admin'], bool):
            raise ValidationError('is_admin must be a boolean')
        if 'avatar' in changes and changes['avatar'] is not None and not isinstance(changes['avatar'], str):
            raise ValidationError('avatar must be a string')

        for name, value in changes.items():
            setattr(user, name, value)
        if 'experience' in changes:
            user.level = level_for_experience(user.experience)
        self._commit_identity_change()
        current_app.logger.info(f"[user-update] user={user.id} fields={','.join(sorted(changes))}")
        return user

    def change_password(self, user_id, current_password, new_password):
        user = self.get_user(user_id)
        if not isinstance(current_password, str) or len(current_password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise InvalidCredentials()
        if not self.bcrypt.check_password_hash(user.password_hash, current_password):
            raise InvalidCredentials()
        _check_password_shape(new_password)
        user.password_hash = self._hash(new_password)
        self.db.session.commit()
        current_app.logger.info(f"[auth-password] user={user.id} changed")
        return user
