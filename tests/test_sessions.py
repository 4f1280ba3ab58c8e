from imageground.navigation import UrlState
from imageground.sessions import SessionRegistry

from tests.conftest import make_image


def test_sessions_are_independent(media, executor):
    registry = SessionRegistry(media, executor)
    catalog = [make_image(i) for i in range(3)]
    first = registry.create(catalog)
    second = registry.create(catalog)

    first.lightbox.open(1)
    first.lightbox.delete(1)

    assert [image.id for image in first.store.visible()] == [0, 2]
    assert [image.id for image in second.store.visible()] == [0, 1, 2]
    assert registry.get(first.id) is first


def test_least_recently_used_is_evicted(media, executor):
    registry = SessionRegistry(media, executor, capacity=2)
    a = registry.create([])
    b = registry.create([])
    registry.get(a.id)
    c = registry.create([])
    assert registry.get(b.id) is None
    assert registry.get(a.id) is a
    assert registry.get(c.id) is c
    assert len(registry) == 2


def test_url_state_is_passed_to_lightbox(media, executor):
    registry = SessionRegistry(media, executor)
    session = registry.create([make_image(0)], url_state=UrlState({'album': 'x'}))
    session.lightbox.open(0)
    assert session.lightbox.view()['displayUrl'] == '/p/0?album=x'


def test_unknown_session(media, executor):
    assert SessionRegistry(media, executor).get('nope') is None
