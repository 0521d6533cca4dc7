import re
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from portfolio.errors import NotAuthenticated, SessionExpired
from portfolio.services.sessions import ReadWriteLock, SessionStore


def test_create_returns_64_hex_token(session_store):
    token = session_store.create('alice')
    assert re.fullmatch(r'[0-9a-f]{64}', token)


def test_validate_returns_username(session_store):
    token = session_store.create('alice')
    assert session_store.validate(token) == 'alice'


def test_unknown_and_empty_tokens_are_rejected(session_store):
    with pytest.raises(NotAuthenticated):
        session_store.validate('deadbeef')
    with pytest.raises(NotAuthenticated):
        session_store.validate('')
    with pytest.raises(NotAuthenticated):
        session_store.validate(None)


def test_expired_session_is_removed(session_store, clock):
    token = session_store.create('alice')
    clock.advance(hours=24, seconds=1)

    with pytest.raises(SessionExpired):
        session_store.validate(token)
    assert len(session_store) == 0
    with pytest.raises(NotAuthenticated):
        session_store.validate(token)


def test_session_valid_until_exact_expiry(session_store, clock):
    token = session_store.create('alice')
    clock.advance(hours=24)
    assert session_store.validate(token) == 'alice'


def test_validate_does_not_extend_lifetime(session_store, clock):
    token = session_store.create('alice')
    clock.advance(hours=23)
    assert session_store.validate(token) == 'alice'
    clock.advance(hours=1, seconds=1)
    with pytest.raises(SessionExpired):
        session_store.validate(token)


def test_destroy(session_store):
    token = session_store.create('alice')
    session_store.destroy(token)
    with pytest.raises(NotAuthenticated):
        session_store.validate(token)
    # destroying twice, or an unknown token, is fine
    session_store.destroy(token)
    session_store.destroy('never-issued')


def test_tokens_are_distinct(session_store):
    tokens = {session_store.create('alice') for _ in range(100)}
    assert len(tokens) == 100


def test_concurrent_creates_are_not_lost():
    store = SessionStore()
    n = 64
    with ThreadPoolExecutor(max_workers=16) as pool:
        tokens = list(pool.map(lambda i: store.create(f'user{i}'), range(n)))

    assert len(store) == n
    assert len(set(tokens)) == n
    for i, token in enumerate(tokens):
        assert store.validate(token) == f'user{i}'


def test_concurrent_validates_on_distinct_tokens():
    store = SessionStore()
    tokens = {store.create(f'user{i}'): f'user{i}' for i in range(32)}

    def check(item):
        token, username = item
        return all(store.validate(token) == username for _ in range(50))

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert all(pool.map(check, tokens.items()))


def test_readers_share_lock_and_writer_waits():
    lock = ReadWriteLock()
    first_in = threading.Event()
    release_first = threading.Event()
    second_in = threading.Event()
    writer_in = threading.Event()

    def first_reader():
        with lock.read():
            first_in.set()
            release_first.wait(2)

    def second_reader():
        with lock.read():
            second_in.set()

    def writer():
        with lock.write():
            writer_in.set()

    t1 = threading.Thread(target=first_reader)
    t1.start()
    assert first_in.wait(1)

    t2 = threading.Thread(target=second_reader)
    t2.start()
    assert second_in.wait(1)

    t3 = threading.Thread(target=writer)
    t3.start()
    assert not writer_in.wait(0.1)

    release_first.set()
    assert writer_in.wait(1)
    for t in (t1, t2, t3):
        t.join(1)
