from imageground.store import GalleryStore

from tests.conftest import make_image


def test_visible_preserves_catalog_order():
    store = GalleryStore([make_image(i) for i in range(5)])
    store.remove(1)
    store.remove(3)
    assert [image.id for image in store.visible()] == [0, 2, 4]


def test_remove_is_monotonic_and_idempotent(store):
    assert store.remove(2) is True
    assert store.remove(2) is False
    assert store.removed_ids == frozenset({2})
    assert store.find(2) is None
    assert len(store.catalog) == 3


def test_find_returns_visible_image(store):
    assert store.find(1).remote_key == 'gallery/photo-1'
    assert store.find(99) is None


def test_upload_progress_lifecycle(store):
    store.begin_upload('Preparing image...')
    store.set_upload_progress('Uploading to cloud...')
    assert store.upload.uploading is True
    assert store.upload.message == 'Uploading to cloud...'
    store.end_upload()
    assert store.upload.uploading is False
    assert store.upload.message == ''
