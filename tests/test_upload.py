import base64

import pytest

from imageground.errors import RemoteError, ValidationError
from imageground.store import GalleryStore
from imageground.upload import MAX_UPLOAD_BYTES, UploadFlow, parse_data_uri, to_data_uri, validate_upload

MB = 1024 * 1024


def test_text_file_is_rejected_before_upload(media):
    with pytest.raises(ValidationError, match='image file'):
        UploadFlow(media).upload('text/plain', b'hello')
    assert media.uploads == []


def test_oversized_image_is_rejected_before_upload(media):
    with pytest.raises(ValidationError, match='10MB'):
        UploadFlow(media).upload('image/jpeg', b'\0' * (15 * MB))
    assert media.uploads == []


def test_five_megabyte_png_is_uploaded(media):
    result = UploadFlow(media).upload('image/png', b'\0' * (5 * MB))
    assert result['public_id'] == 'gallery/new-photo'
    assert len(media.uploads) == 1
    assert media.uploads[0].startswith('data:image/png;base64,')


def test_limit_is_inclusive():
    validate_upload('image/gif', MAX_UPLOAD_BYTES)
    with pytest.raises(ValidationError):
        validate_upload('image/gif', MAX_UPLOAD_BYTES + 1)
    with pytest.raises(ValidationError):
        validate_upload(None, 10)


def test_progress_tracks_success(media):
    store = GalleryStore([])
    UploadFlow(media, store).upload('image/png', b'png')
    assert store.upload.message == 'Upload complete!'
    assert store.upload.uploading is False


def test_progress_resets_on_failure(media):
    media.upload_error = RemoteError('quota exceeded', status=420)
    store = GalleryStore([])
    with pytest.raises(RemoteError):
        UploadFlow(media, store).upload('image/png', b'png')
    assert store.upload.uploading is False
    assert store.upload.message == ''


def test_data_uri_parsing():
    uri = to_data_uri('image/webp', b'abc')
    assert parse_data_uri(uri) == ('image/webp', b'abc')
    assert parse_data_uri('data:image/png;name=a.png;base64,' + base64.b64encode(b'x').decode()) == ('image/png', b'x')


@pytest.mark.parametrize('uri', ['', 'hello', 'data:image/png,rawbytes', 'data:image/png;base64,@@@'])
def test_bad_data_uri(uri):
    with pytest.raises(ValidationError):
        parse_data_uri(uri)


def test_data_uri_upload_validates_type(media):
    with pytest.raises(ValidationError):
        UploadFlow(media).upload_data_uri(to_data_uri('text/plain', b'notes'))
    assert media.uploads == []
