from __future__ import annotations

import asyncio

import pytest

from jsondb import AsyncTypedJsonDB, MergeTargetMissingError


def test_async_typed_db_basic_flow(make_db):
    async def _run():
        repo = AsyncTypedJsonDB(make_db())

        await repo.set("/login", {"username": "a", "password": "b"})
        await repo.merge("/login", {"username": "c"})
        assert await repo.get("/login") == {"username": "c", "password": "b"}

        await repo.push("/restaurants", {"name": "r1"})
        await repo.push("/restaurants", {"name": "r2"})
        assert await repo.get_at("/restaurants") == {"name": "r2"}
        assert await repo.find("/restaurants", lambda r, i: r["name"] == "r1") == {"name": "r1"}
        assert await repo.filter("/restaurants", lambda r, i: i > 0) == [{"name": "r2"}]

        await repo.push_if_not_exists("/teams", {})
        await repo.push("/teams", "v1", "alice")
        assert await repo.exists("/teams", "alice")
        await repo.delete("/teams", "alice")
        assert not await repo.exists("/teams", "alice")

        with pytest.raises(MergeTargetMissingError):
            await repo.merge("/teams", "v2", "alice")

    asyncio.run(_run())


def test_async_concurrent_pushes_are_serialized(make_db):
    async def _run():
        repo = AsyncTypedJsonDB(make_db(save_on_push=False))
        await asyncio.gather(*(repo.push("/restaurants", {"n": i}) for i in range(50)))
        items = await repo.get("/restaurants")
        assert sorted(r["n"] for r in items) == list(range(50))
        await repo.save()
        await repo.reload()
        assert len(await repo.get("/restaurants")) == 50

    asyncio.run(_run())
