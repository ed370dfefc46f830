from concurrent.futures import ThreadPoolExecutor

from app.config import get_settings
from app.services.user_service import create_user, get_user_minutes, set_user_minutes


def test_concurrent_minutes_lookups(db, session_factory):
    user = create_user(db, email="busy@example.com", name="Busy")
    set_user_minutes(db, user.id, 100)

    def lookup(_):
        session = session_factory()
        try:
            return get_user_minutes(session, "busy@example.com")
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(lookup, range(50)))

    assert results == [100] * 50


def test_concurrent_minutes_writes_and_reads(db, session_factory):
    user = create_user(db, email="mixed@example.com", name="Mixed")
    set_user_minutes(db, user.id, 0)
    written = [10 * i for i in range(1, 11)]

    def write(minutes):
        session = session_factory()
        try:
            return set_user_minutes(session, user.id, minutes).minutes
        finally:
            session.close()

    def read(_):
        session = session_factory()
        try:
            return get_user_minutes(session, "mixed@example.com")
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=8) as pool:
        writes = [pool.submit(write, m) for m in written]
        reads = [pool.submit(read, i) for i in range(30)]
        write_results = [f.result() for f in writes]
        read_results = [f.result() for f in reads]

    assert write_results == written
    # every read sees either the starting balance or one committed write
    assert set(read_results) <= {0, *written}

    db.expire_all()
    assert get_user_minutes(db, "mixed@example.com") in written


def test_concurrent_stripe_page_requests(client, db):
    user = create_user(db, email=get_settings().CREDITS_EMAIL, name="Test User")
    set_user_minutes(db, user.id, 100)

    def fetch(_):
        return client.get("/stripePage")

    with ThreadPoolExecutor(max_workers=5) as pool:
        responses = list(pool.map(fetch, range(10)))

    assert [r.status_code for r in responses] == [200] * 10
    for response in responses:
        assert '<div class="stat-value text-primary">100</div>' in response.text
