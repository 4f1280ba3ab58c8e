from imageground.loading import LoadStatus

from tests.conftest import make_image
from imageground.store import GalleryStore
from imageground.lightbox import Lightbox


def _load(lightbox):
    lightbox.loaded(lightbox.loader.request.token)


def test_walkthrough(lightbox, store):
    lightbox.open(1)
    lightbox.next()
    assert lightbox.navigation.open_id == 2
    assert lightbox.navigation.direction == 1
    lightbox.next()
    assert lightbox.navigation.open_id == 2

    lightbox.delete(2)
    assert [image.id for image in store.visible()] == [0, 1]
    view = lightbox.view()
    assert view['open'] is False
    assert view['photoId'] is None


def test_view_closes_when_open_photo_was_removed(lightbox, store):
    lightbox.open(1)
    store.remove(1)
    view = lightbox.view()
    assert view['open'] is False
    assert lightbox.navigation.open_id is None
    assert lightbox.loader.status is LoadStatus.IDLE


def test_chrome_hidden_until_loaded(lightbox):
    lightbox.open(1)
    view = lightbox.view()
    assert view['status'] == 'loading'
    assert view['chrome'] is False
    assert view['hasNext'] is False
    assert view['thumbnails'] == []
    assert view['load']['src'] == 'https://res.cloudinary.com/demo/image/upload/c_fit,w_1920,h_1080/gallery/photo-1.jpg'
    assert lightbox.request_delete() is False

    _load(lightbox)
    view = lightbox.view()
    assert view['chrome'] is True
    assert view['hasPrevious'] is True
    assert view['hasNext'] is True
    assert view['load'] is None
    assert [t['id'] for t in view['thumbnails']] == [0, 1, 2]
    assert [t['current'] for t in view['thumbnails']] == [False, True, False]


def test_errored_view_offers_retry(lightbox):
    lightbox.open(0)
    lightbox.failed(lightbox.loader.request.token)
    view = lightbox.view()
    assert view['status'] == 'errored'
    assert view['error'] == 'Failed to load image'
    assert view['chrome'] is False

    lightbox.retry()
    assert lightbox.view()['status'] == 'loading'


def test_switching_images_resets_load_state(lightbox):
    lightbox.open(0)
    stale = lightbox.loader.request.token
    lightbox.open(1)
    assert lightbox.loader.status is LoadStatus.LOADING
    assert lightbox.loaded(stale) is False
    assert lightbox.failed(stale) is False
    assert lightbox.view()['status'] == 'loading'
    assert lightbox.view()['photoId'] == 1


def test_loaded_state_not_carried_to_next_image(lightbox):
    lightbox.open(0)
    _load(lightbox)
    lightbox.next()
    assert lightbox.loader.status is LoadStatus.LOADING
    assert lightbox.view()['chrome'] is False


def test_close_reports_scroll_target_once(lightbox):
    lightbox.open(2)
    lightbox.close()
    assert lightbox.view()['scrollTo'] == 2
    assert lightbox.view()['scrollTo'] is None


def test_view_urls(lightbox):
    lightbox.open(1)
    view = lightbox.view()
    assert view['url'] == '/?photoId=1'
    assert view['displayUrl'] == '/p/1'
    assert view['image']['originalSrc'] == 'https://res.cloudinary.com/demo/image/upload/gallery/photo-1.jpg'


def test_thumbnail_strip_is_windowed(media, executor):
    store = GalleryStore([make_image(i) for i in range(50)])
    lightbox = Lightbox(store, media, executor)
    lightbox.open(25)
    _load(lightbox)
    ids = [t['id'] for t in lightbox.view()['thumbnails']]
    assert ids == list(range(10, 41))
