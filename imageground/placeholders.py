"""Tiny blurred previews shown while the real image loads."""

import base64
from io import BytesIO

from PIL import Image, UnidentifiedImageError
from loguru import logger

from .errors import RemoteError
from .media import PLACEHOLDER_RESOLUTION

PLACEHOLDER_SIZE = 8


def blur_placeholder(image_bytes, size=PLACEHOLDER_SIZE):
    """Re-encode `image_bytes` as a small JPEG data URL."""
    with Image.open(BytesIO(image_bytes)) as img:
        preview = img.convert('RGB')
        preview.thumbnail((size, size))
        buffer = BytesIO()
        preview.save(buffer, format='JPEG', quality=70)
    encoded = base64.b64encode(buffer.getvalue()).decode('utf-8')
    return f'data:image/jpeg;base64,{encoded}'


def fetch_placeholder(media, image):
    url = media.delivery_url(image, PLACEHOLDER_RESOLUTION)
    try:
        return blur_placeholder(media.fetch(url))
    except (RemoteError, UnidentifiedImageError, OSError) as e:
        logger.warning('No blur placeholder for {}: {}', image.remote_key, e)
        return ''
