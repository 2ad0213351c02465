"""Account domain services: credentials, sessions, scores, leaderboards.

``AccountServices`` bundles the four collaborators for one application. It is
built in ``create_app`` and reached from request handlers through
``get_accounts()``, so every app (and every test) gets its own instance.
"""

from flask import current_app

from .credentials import CredentialStore
from .leaderboard import LeaderboardAggregator
from .ledger import ScoreLedger
from .tokens import SessionIssuer

EXTENSION_KEY = 'accounts'


class AccountServices:
    def __init__(self, db, bcrypt, secret_key, token_ttl_sec, leaderboard_size=10, clock=None):
        self.issuer = SessionIssuer(secret_key, token_ttl_sec, clock=clock)
        self.credentials = CredentialStore(db, bcrypt, self.issuer)
        self.ledger = ScoreLedger(db)
        self.leaderboard = LeaderboardAggregator(db, size=leaderboard_size)

    @classmethod
    def from_app(cls, flask_app, db, bcrypt):
        services = cls(
            db,
            bcrypt,
            secret_key=flask_app.config['SECRET_KEY'],
            token_ttl_sec=flask_app.config.get('TOKEN_TTL_SEC', 7 * 24 * 60 * 60),
            leaderboard_size=flask_app.config.get('LEADERBOARD_SIZE', 10),
        )
        flask_app.extensions[EXTENSION_KEY] = services
        return services


def get_accounts() -> AccountServices:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'AccountServices',
    'CredentialStore',
    'LeaderboardAggregator',
    'ScoreLedger',
    'SessionIssuer',
    'get_accounts',
]
