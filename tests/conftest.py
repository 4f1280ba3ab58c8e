from concurrent.futures import Future
from io import BytesIO

import pytest
from PIL import Image as PILImage

from imageground.config import Settings
from imageground.errors import RemoteError
from imageground.lightbox import Lightbox
from imageground.media import build_delivery_url
from imageground.models import Image
from imageground.store import GalleryStore


def png_bytes(size=(16, 12), color=(200, 30, 30)):
    buffer = BytesIO()
    PILImage.new('RGB', size, color).save(buffer, format='PNG')
    return buffer.getvalue()


def make_image(image_id, **overrides):
    fields = dict(
        id=image_id,
        width='1920',
        height='1080',
        remote_key=f'gallery/photo-{image_id}',
        format='jpg',
        created_at='2025-03-0{}T10:00:00Z'.format(image_id % 9 + 1),
    )
    fields.update(overrides)
    return Image(**fields)


def make_resource(public_id, tags=None):
    return {
        'public_id': public_id,
        'format': 'jpg',
        'width': 1600,
        'height': 900,
        'created_at': '2025-05-01T08:30:00Z',
        'tags': tags or [],
    }


class FakeMedia:
    cloud_name = 'demo'

    def __init__(self, resources=None):
        self.resources = resources or []
        self.search_error = None
        self.destroy_result = 'ok'
        self.destroy_error = None
        self.upload_error = None
        self.destroyed = []
        self.uploads = []
        self.fetched = []

    def delivery_url(self, image, transformation=None):
        return build_delivery_url(self.cloud_name, image.remote_key, image.format, transformation)

    def search(self, folder=None, limit=400):
        if self.search_error:
            raise self.search_error
        return list(self.resources)

    def upload(self, data_uri):
        if self.upload_error:
            raise self.upload_error
        self.uploads.append(data_uri)
        return {'public_id': 'gallery/new-photo', 'format': 'png'}

    def destroy(self, remote_key):
        self.destroyed.append(remote_key)
        if self.destroy_error:
            raise self.destroy_error
        return self.destroy_result

    def fetch(self, url):
        self.fetched.append(url)
        return png_bytes()

    def stream(self, url):
        raise RemoteError('streaming not faked')


class InlineExecutor:
    """Runs submitted work immediately on the calling thread."""

    def __init__(self):
        self.submitted = 0

    def submit(self, fn, *args, **kwargs):
        self.submitted += 1
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future


@pytest.fixture
def media():
    return FakeMedia()


@pytest.fixture
def executor():
    return InlineExecutor()


@pytest.fixture
def store():
    return GalleryStore([make_image(i) for i in range(3)])


@pytest.fixture
def lightbox(store, media, executor):
    return Lightbox(store, media, executor)


@pytest.fixture
def settings():
    return Settings(cloud_name='demo', api_key='key', api_secret='secret', folder='gallery')
