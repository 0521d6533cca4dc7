"""
Admin Session Store

Server-side admin sessions kept in process memory. Tokens are opaque random
strings handed to the browser in a cookie; the username and lifetime live
here only, so a restart logs every admin out.

Expired entries are removed lazily, the next time their token is validated.
"""

import logging
import secrets
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta

from portfolio.errors import NotAuthenticated, SessionExpired
from portfolio.utils import utcnow

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)
TOKEN_BYTES = 32


@dataclass(frozen=True)
class Session:
    username: str
    created_at: datetime
    expires_at: datetime


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer.

    Readers are not held back while a writer waits, so a constant stream of
    readers can delay writers indefinitely. Admin traffic is far too light
    for that to matter.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self):
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class SessionStore:
    """Thread-safe token -> Session map with a fixed time-to-live."""

    def __init__(self, ttl=DEFAULT_TTL, clock=utcnow):
        self.ttl = ttl
        self._clock = clock
        self._sessions = {}
        self._lock = ReadWriteLock()

    def __len__(self):
        with self._lock.read():
            return len(self._sessions)

    def create(self, username):
        """Start a session for `username` and return its token."""
        token = secrets.token_hex(TOKEN_BYTES)
        now = self._clock()
        session = Session(username=username, created_at=now, expires_at=now + self.ttl)
        with self._lock.write():
            self._sessions[token] = session
        logger.info('Admin session created for %s', username)
        return token

    def validate(self, token):
        """Return the username bound to `token`.

        Raises NotAuthenticated for unknown tokens and SessionExpired (after
        dropping the entry) once the session has outlived its TTL.
        """
        if not token:
            raise NotAuthenticated('no session token')

        with self._lock.read():
            session = self._sessions.get(token)

        if session is None:
            raise NotAuthenticated('unknown session token')

        if self._clock() > session.expires_at:
            with self._lock.write():
                if self._sessions.get(token) is session:
                    del self._sessions[token]
            logger.info('Admin session for %s expired', session.username)
            raise SessionExpired('session expired')

        return session.username

    def destroy(self, token):
        with self._lock.write():
            self._sessions.pop(token, None)
