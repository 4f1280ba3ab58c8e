"""Per page-load state kept on the server."""

import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from loguru import logger

from .lightbox import Lightbox
from .store import GalleryStore

DEFAULT_CAPACITY = 256


@dataclass
class GallerySession:
    id: str
    store: GalleryStore
    lightbox: Lightbox
    lock: threading.RLock = field(default_factory=threading.RLock)


class SessionRegistry:
    """Least-recently-used map of page sessions."""

    def __init__(self, media, executor, capacity=DEFAULT_CAPACITY):
        self.media = media
        self.executor = executor
        self.capacity = capacity
        self._sessions = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def create(self, catalog, url_state=None):
        store = GalleryStore(catalog)
        lightbox = Lightbox(store, self.media, self.executor, url_state=url_state)
        session = GallerySession(uuid.uuid4().hex, store, lightbox)
        with self._lock:
            self._sessions[session.id] = session
            while len(self._sessions) > self.capacity:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug('Evicted page session {}', evicted)
        return session

    def get(self, session_id):
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
            return session
