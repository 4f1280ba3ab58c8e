"""Upload validation and the upload call itself."""

import base64
import binascii
import re

from loguru import logger

from .errors import ValidationError

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_DATA_URI = re.compile(r'^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]*)*);base64,(?P<data>.*)$', re.DOTALL)


def validate_upload(content_type, size):
    if not (content_type or '').startswith('image/'):
        raise ValidationError('Please select an image file')
    if size > MAX_UPLOAD_BYTES:
        raise ValidationError('File size must be less than 10MB')


def to_data_uri(content_type, payload):
    return f"data:{content_type};base64,{base64.b64encode(payload).decode('ascii')}"


def parse_data_uri(data_uri):
    """Split a base64 data URI into `(content_type, bytes)`."""
    match = _DATA_URI.match(data_uri or '')
    if not match:
        raise ValidationError('File must be a base64 data URI')
    try:
        payload = base64.b64decode(match.group('data'), validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError('File is not valid base64')
    return match.group('mime') or '', payload


class UploadFlow:
    """Validate, then send one file to the media service.

    Progress is mirrored into the page's store when one is given.
    """

    def __init__(self, media, store=None):
        self.media = media
        self.store = store

    def _progress(self, message):
        if self.store is not None:
            self.store.set_upload_progress(message)

    def upload(self, content_type, payload):
        validate_upload(content_type, len(payload))
        if self.store is not None:
            self.store.begin_upload('Preparing image...')
        try:
            data_uri = to_data_uri(content_type, payload)
            self._progress('Uploading to cloud...')
            result = self.media.upload(data_uri)
        except Exception:
            if self.store is not None:
                self.store.end_upload()
            raise
        if self.store is not None:
            self.store.finish_upload('Upload complete!')
        logger.info('Upload of {} bytes finished as {}', len(payload), result.get('public_id'))
        return result

    def upload_data_uri(self, data_uri):
        content_type, payload = parse_data_uri(data_uri)
        return self.upload(content_type, payload)
