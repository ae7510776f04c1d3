from app.schemas import JokeRecord
from app.services.favorites import FavoritesStore
from conftest import CHICKEN, SKELETON


def test_add_is_idempotent():
    store = FavoritesStore()
    joke = JokeRecord(**CHICKEN)

    assert store.add(joke) is True
    assert store.add(joke) is False
    assert store.all() == (joke,)


def test_add_keeps_insertion_order_and_membership():
    store = FavoritesStore()
    chicken, skeleton = JokeRecord(**CHICKEN), JokeRecord(**SKELETON)

    store.add(skeleton)
    store.add(chicken)

    assert store.all() == (skeleton, chicken)
    assert store.contains(chicken)
    assert chicken in store
    assert len(store) == 2
    assert list(store) == [skeleton, chicken]


def test_same_id_with_different_status_is_a_different_favorite():
    store = FavoritesStore()

    store.add(JokeRecord(**CHICKEN))

    assert store.add(JokeRecord(**{**CHICKEN, "status": 201})) is True
    assert len(store) == 2


def test_replace_all_drops_repeats():
    chicken, skeleton = JokeRecord(**CHICKEN), JokeRecord(**SKELETON)
    store = FavoritesStore([chicken])

    store.replace_all([skeleton, chicken, skeleton])

    assert store.all() == (skeleton, chicken)


def test_all_is_a_snapshot():
    store = FavoritesStore()
    snapshot = store.all()

    store.add(JokeRecord(**CHICKEN))

    assert snapshot == ()


def test_remove():
    chicken = JokeRecord(**CHICKEN)
    store = FavoritesStore([chicken])

    assert store.remove(chicken) is True
    assert store.remove(chicken) is False
    assert len(store) == 0
