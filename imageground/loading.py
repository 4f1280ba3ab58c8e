"""Load lifecycle of the image shown in the lightbox."""

import itertools
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from .errors import LoadError


class LoadStatus(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    LOADED = 'loaded'
    ERRORED = 'errored'


@dataclass(frozen=True)
class LoadRequest:
    token: int
    image_id: int
    url: str

    def to_dict(self):
        return {'token': self.token, 'imageId': self.image_id, 'src': self.url}


class ImageLoadStateMachine:
    """Idle -> Loading -> Loaded | Errored, with Errored -> Loading on retry.

    Each request carries a token; a completion is applied only when its token
    is still the current one, so results of superseded loads are dropped.
    """

    def __init__(self, url_for, issue=None):
        self.url_for = url_for
        self.issue = issue
        self._tokens = itertools.count(1)
        self.status = LoadStatus.IDLE
        self.request = None
        self.error = None

    @property
    def image_id(self):
        return self.request.image_id if self.request else None

    @property
    def chrome_visible(self):
        return self.status is LoadStatus.LOADED

    def reset(self):
        self.status = LoadStatus.IDLE
        self.request = None
        self.error = None

    def start(self, image):
        self.reset()
        return self._begin(image.id, self.url_for(image))

    def _begin(self, image_id, url):
        self.request = LoadRequest(next(self._tokens), image_id, url)
        self.status = LoadStatus.LOADING
        self.error = None
        if self.issue is not None:
            self.issue(self.request)
        return self.request

    def is_current(self, token):
        return self.request is not None and self.request.token == token

    def succeed(self, token):
        if not self._accept(token):
            return False
        self.status = LoadStatus.LOADED
        return True

    def fail(self, token, reason='Failed to load image'):
        if not self._accept(token):
            return False
        self.status = LoadStatus.ERRORED
        self.error = LoadError(self.request.image_id, reason)
        logger.info('Image {} failed to load: {}', self.request.image_id, reason)
        return True

    def retry(self):
        if self.status is not LoadStatus.ERRORED:
            return None
        return self._begin(self.request.image_id, self.request.url)

    def _accept(self, token):
        if not self.is_current(token) or self.status is not LoadStatus.LOADING:
            logger.debug('Ignoring stale load completion for token {}', token)
            return False
        return True
