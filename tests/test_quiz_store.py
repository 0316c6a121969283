import pytest

from quiz_api.services.quiz_store import QuizStore
from quiz_api.utils.exceptions import StoreError


@pytest.fixture
def store(session_factory):
    return QuizStore(session_factory)


@pytest.mark.asyncio
async def test_list_empty(store):
    assert await store.list_all() == []


@pytest.mark.asyncio
async def test_create_then_list(store):
    created = await store.create("2+2?", ["3", "4"], 1)
    assert created.id

    questions = await store.list_all()
    assert len(questions) == 1
    assert questions[0].id == created.id
    assert questions[0].question == "2+2?"
    assert questions[0].choices == ["3", "4"]
    assert questions[0].correct == 1


@pytest.mark.asyncio
async def test_list_keeps_insertion_order(store):
    ids = [(await store.create(f"q{i}", ["a", "b"], 0)).id for i in range(3)]

    assert [q.id for q in await store.list_all()] == ids


@pytest.mark.asyncio
async def test_correct_index_is_not_validated(store):
    created = await store.create("odd", ["only"], 5)
    assert created.correct == 5


@pytest.mark.asyncio
async def test_delete_then_list(store):
    keep = await store.create("keep", ["a"], 0)
    gone = await store.create("gone", ["b"], 0)

    assert await store.delete_by_id(gone.id) is True

    assert [q.id for q in await store.list_all()] == [keep.id]


@pytest.mark.asyncio
async def test_delete_unknown_id_is_benign(store):
    assert await store.delete_by_id("does-not-exist") is False
    assert await store.list_all() == []


@pytest.mark.asyncio
async def test_create_with_oversized_int_raises_store_error(store):
    with pytest.raises(StoreError):
        await store.create("big", ["a"], 10**20)

    assert await store.list_all() == []
