from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

from loguru import logger

from .media import SEARCH_LIMIT
from .models import image_from_resource
from .placeholders import fetch_placeholder

PLACEHOLDER_WORKERS = 8


def load_catalog(media, folder=None, limit=SEARCH_LIMIT):
    """Query the media service and number the result densely from 0.

    Raises `RemoteError` when the search itself fails; placeholder failures
    only leave that image without a preview.
    """
    resources = media.search(folder, limit)
    images = [image_from_resource(index, resource) for index, resource in enumerate(resources)]
    if not images:
        logger.info('Catalog is empty')
        return []

    with ThreadPoolExecutor(max_workers=PLACEHOLDER_WORKERS) as pool:
        placeholders = list(pool.map(lambda image: fetch_placeholder(media, image), images))

    logger.info('Loaded catalog with {} images', len(images))
    return [replace(image, blur_placeholder=placeholder) for image, placeholder in zip(images, placeholders)]
