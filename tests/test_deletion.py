import pytest

from imageground.errors import NotFoundError, RemoteError


def test_delete_hides_locally_and_closes(lightbox, store, media):
    lightbox.open(2)
    future = lightbox.delete(2)
    assert [image.id for image in store.visible()] == [0, 1]
    assert lightbox.navigation.open_id is None
    assert future.result() == 'ok'
    assert media.destroyed == ['gallery/photo-2']


def test_removal_happens_before_remote_call(lightbox, store, media):
    seen = []

    def destroy(remote_key):
        seen.append(store.removed_ids)
        return 'ok'

    lightbox.deletion.remote_delete = destroy
    lightbox.open(1)
    lightbox.delete(1)
    assert seen == [frozenset({1})]


def test_delete_unknown_raises_not_found(lightbox, media, executor):
    with pytest.raises(NotFoundError):
        lightbox.delete(99)
    assert executor.submitted == 0
    assert media.destroyed == []


@pytest.mark.parametrize('outcome', ['ok', 'not found', 'failed'])
def test_remote_outcome_never_restores_image(lightbox, store, media, outcome):
    if outcome == 'failed':
        media.destroy_error = RemoteError('boom', status=500)
    else:
        media.destroy_result = outcome
    lightbox.open(0)
    future = lightbox.delete(0)
    assert future.result() == outcome
    assert 0 not in [image.id for image in store.visible()]
    with pytest.raises(NotFoundError):
        lightbox.delete(0)
    assert 0 not in [image.id for image in store.visible()]


def test_confirmation_gates_delete(lightbox, store, media):
    lightbox.open(1)
    lightbox.loaded(lightbox.loader.request.token)

    assert lightbox.request_delete() is True
    lightbox.cancel_delete()
    assert lightbox.confirm_delete() is None
    assert len(store.visible()) == 3

    lightbox.request_delete()
    lightbox.confirm_delete()
    assert [image.id for image in store.visible()] == [0, 2]
    assert media.destroyed == ['gallery/photo-1']


def test_delete_does_not_touch_scroll_memory(lightbox):
    lightbox.open(1)
    lightbox.delete(1)
    assert lightbox.navigation.scroll_memory.consume() is None


def test_navigation_cancels_pending_confirmation(lightbox):
    lightbox.open(0)
    lightbox.loaded(lightbox.loader.request.token)
    lightbox.request_delete()
    lightbox.next()
    assert lightbox.deletion.confirming is False
