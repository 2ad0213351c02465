import time
from typing import Callable, Optional

from itsdangerous import BadPayload, BadSignature, URLSafeSerializer

from arcade.errors import TokenExpired, TokenMalformed, TokenSignatureInvalid


class SessionIssuer:
    """Mints and verifies signed bearer tokens.

    The payload is ``{"sub": user_id, "exp": unix_seconds}``. Tokens cannot be
    forged without ``secret_key`` and stop verifying once ``exp`` has passed.
    There is no revocation list: a token stays valid until it expires.
    """

    salt = 'arcade-session'

    def __init__(self, secret_key: str, ttl_sec: int, clock: Optional[Callable[[], float]] = None):
        self.ttl_sec = int(ttl_sec)
        self._clock = clock or time.time
        self._serializer = URLSafeSerializer(secret_key, salt=self.salt)

    def issue(self, user_id: str) -> str:
        expires_at = int(self._clock()) + self.ttl_sec
        return self._serializer.dumps({'sub': user_id, 'exp': expires_at})

    def verify(self, token: str) -> str:
        """Return the user id bound to ``token``.

        Raises TokenMalformed, TokenSignatureInvalid or TokenExpired.
        """
        if not token or not isinstance(token, str) or '.' not in token:
            raise TokenMalformed()
        try:
            payload = self._serializer.loads(token)
        except BadPayload:
            raise TokenMalformed()
        except BadSignature:
            raise TokenSignatureInvalid()

        if not isinstance(payload, dict):
            raise TokenMalformed()
        user_id = payload.get('sub')
        expires_at = payload.get('exp')
        if not isinstance(user_id, str) or not isinstance(expires_at, int):
            raise TokenMalformed()
        if expires_at <= self._clock():
            raise TokenExpired()
        return user_id
