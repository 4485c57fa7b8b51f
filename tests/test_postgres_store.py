"""Tests for the PostgreSQL link store against a mocked asyncpg pool."""

from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest

from tinee.lib.database.models import Link
from tinee.lib.database.postgres import PostgresLinkStore
from tinee.lib.errors import LinkNotFoundError, StoreError


@pytest.fixture
def conn():
    conn = MagicMock()
    conn.execute = AsyncMock()
    conn.executemany = AsyncMock()
    conn.fetch = AsyncMock(return_value=[])
    conn.fetchrow = AsyncMock(return_value=None)
    return conn


@pytest.fixture
def pool(conn):
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    pool.close = AsyncMock()
    return pool


@pytest.fixture
def create_pool(monkeypatch, pool):
    create_pool = AsyncMock(return_value=pool)
    monkeypatch.setattr(asyncpg, "create_pool", create_pool)
    return create_pool


@pytest.fixture
def pg_store(create_pool, logger):
    return PostgresLinkStore(dsn="postgresql://tinee@localhost/tinee", logger=logger)


class TestPostgresLinkStore:

    async def test_save_new_link(self, pg_store, conn):
        link = Link(id="A", url="https://a.com", aliases=["abc12345"])

        await pg_store.save(link)

        insert_sql, *params = conn.execute.await_args.args
        assert "INSERT INTO links" in insert_sql
        assert params == ["A", "https://a.com"]
        conn.executemany.assert_awaited_once()
        assert conn.executemany.await_args.args[1] == [("abc12345", "A", 0)]

    async def test_save_appends_only_new_aliases(self, pg_store, conn):
        conn.fetch.return_value = [{"alias": "abc12345"}]
        link = Link(id="A", url="https://a.com", aliases=["abc12345", "mylink"])

        await pg_store.save(link)

        assert conn.executemany.await_args.args[1] == [("mylink", "A", 1)]

    async def test_save_without_new_aliases(self, pg_store, conn):
        conn.fetch.return_value = [{"alias": "abc12345"}]

        await pg_store.save(Link(id="A", url="https://a.com", aliases=["abc12345"]))

        conn.executemany.assert_not_called()

    async def test_save_unique_violation(self, pg_store, conn):
        conn.executemany.side_effect = asyncpg.exceptions.UniqueViolationError("duplicate alias")

        with pytest.raises(StoreError):
            await pg_store.save(Link(id="B", url="https://b.com", aliases=["abc12345"]))

    async def test_find_by_url(self, pg_store, conn):
        conn.fetchrow.return_value = {"id": "A", "url": "https://a.com", "aliases": ["abc12345", "mylink"]}

        link = await pg_store.find_by_url("https://a.com")

        assert link == Link(id="A", url="https://a.com", aliases=["abc12345", "mylink"])
        assert conn.fetchrow.await_args.args[1] == "https://a.com"

    async def test_find_by_url_not_found(self, pg_store):
        with pytest.raises(LinkNotFoundError):
            await pg_store.find_by_url("https://missing.com")

    async def test_find_by_alias(self, pg_store, conn):
        conn.fetchrow.return_value = {"id": "A", "url": "https://a.com", "aliases": ["abc12345"]}

        link = await pg_store.find_by_alias("abc12345")

        assert link.url == "https://a.com"
        assert "link_aliases WHERE alias = $1" in conn.fetchrow.await_args.args[0]

    async def test_find_by_alias_not_found(self, pg_store):
        with pytest.raises(LinkNotFoundError):
            await pg_store.find_by_alias("nope1234")

    async def test_connection_failure(self, pg_store, create_pool):
        create_pool.side_effect = OSError("connection refused")

        with pytest.raises(StoreError):
            await pg_store.find_by_alias("abc12345")

    async def test_pool_is_reused(self, pg_store, create_pool):
        await pg_store.health_check()
        await pg_store.health_check()

        create_pool.assert_awaited_once()

    async def test_health_check(self, pg_store, create_pool):
        assert await pg_store.health_check() is True

        await pg_store.close()
        create_pool.side_effect = OSError("connection refused")
        assert await pg_store.health_check() is False

    async def test_create_tables_on_connect(self, create_pool, conn, logger):
        store = PostgresLinkStore(dsn="postgresql://tinee@localhost/tinee", create_tables=True, logger=logger)

        await store.health_check()

        conn.execute.assert_awaited_once_with(PostgresLinkStore.CREATE_TABLES_SQL)

    async def test_ensure_schema(self, pg_store, conn):
        await pg_store.ensure_schema()

        conn.execute.assert_awaited_once_with(PostgresLinkStore.CREATE_TABLES_SQL)

    async def test_close(self, pg_store, pool):
        await pg_store.health_check()
        await pg_store.close()

        pool.close.assert_awaited_once()
