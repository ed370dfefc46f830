from sqlalchemy import inspect, text

from app.db.session import create_db_engine, init_db


def test_init_db_creates_all_tables(db_engine):
    tables = set(inspect(db_engine).get_table_names())
    assert {"users", "calls", "call_logs"} <= tables

    with db_engine.connect() as conn:
        result = conn.execute(text("SELECT 1"))
        assert result.scalar() == 1


def test_init_db_is_safe_on_existing_database(tmp_path):
    url = f"sqlite:///{tmp_path / 'existing.db'}"

    first = create_db_engine(url)
    init_db(first)
    with first.begin() as conn:
        conn.execute(text("INSERT INTO users (email, name, minutes, created_at, updated_at) "
                          "VALUES ('keep@example.com', 'Keep', 5, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"))
    first.dispose()

    second = create_db_engine(url)
    init_db(second)
    with second.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM users")).scalar()
    second.dispose()

    assert count == 1


def test_sqlite_foreign_keys_are_enforced(db_engine):
    with db_engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
