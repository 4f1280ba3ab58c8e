"""Which photo is open, and how the user moves between photos."""

from urllib.parse import urlencode

from loguru import logger

THUMBNAIL_RADIUS = 15
SWIPE_THRESHOLD = 10

KEY_PREVIOUS = 'ArrowLeft'
KEY_NEXT = 'ArrowRight'
KEY_CLOSE = 'Escape'

PHOTO_PARAM = 'photoId'


def resolve_position(images, image_id):
    """Index of `image_id` in `images`, or -1.

    Every navigation entry point goes through here so that positions always
    come from the live visible list, never from a stored index.
    """
    if image_id is None:
        return -1
    for position, image in enumerate(images):
        if image.id == image_id:
            return position
    return -1


def thumbnail_window(images, image_id, radius=THUMBNAIL_RADIUS):
    position = resolve_position(images, image_id)
    if position < 0:
        return []
    low = max(0, position - radius)
    high = min(len(images) - 1, position + radius)
    return images[low:high + 1]


def _sign(value):
    return (value > 0) - (value < 0)


class UrlState:
    """Shareable URL of the page: list view, or one open photo.

    Query parameters other than the photo id are carried through every
    transition.
    """

    def __init__(self, params=None, photo_id=None):
        self.params = {k: v for k, v in (params or {}).items() if k != PHOTO_PARAM}
        self.photo_id = photo_id

    def _query(self, extra=None):
        params = dict(self.params)
        if extra:
            params.update(extra)
        return f'?{urlencode(params)}' if params else ''

    @property
    def url(self):
        """Route form, e.g. `/?photoId=3`."""
        if self.photo_id is None:
            return '/' + self._query()
        return '/' + self._query({PHOTO_PARAM: self.photo_id})

    @property
    def display_url(self):
        """Pretty form shown in the address bar, e.g. `/p/3`."""
        if self.photo_id is None:
            return '/' + self._query()
        return f'/p/{self.photo_id}' + self._query()

    def push_photo(self, photo_id):
        self.photo_id = photo_id

    def push_list(self):
        self.photo_id = None


class ScrollMemory:
    """Last photo viewed, so the grid can scroll it into view once."""

    def __init__(self):
        self.last_viewed_id = None

    def remember(self, image_id):
        self.last_viewed_id = image_id

    def consume(self):
        image_id, self.last_viewed_id = self.last_viewed_id, None
        return image_id


class SwipeDetector:
    def __init__(self, threshold=SWIPE_THRESHOLD, track_mouse=True):
        self.threshold = threshold
        self.track_mouse = track_mouse

    def classify(self, dx, dy, pointer='touch'):
        """Return `'left'`, `'right'` or None for a pointer movement."""
        if pointer == 'mouse' and not self.track_mouse:
            return None
        if abs(dx) < self.threshold or abs(dx) <= abs(dy):
            return None
        return 'left' if dx < 0 else 'right'


class NavigationController:
    """Owns `open_id` and `direction` for one lightbox.

    `listener` is called with the newly open image after every change, or
    with None when the lightbox closes.
    """

    def __init__(self, visible, url_state=None, scroll_memory=None, listener=None, swipe=None):
        self._visible = visible
        self.url_state = url_state or UrlState()
        self.scroll_memory = scroll_memory or ScrollMemory()
        self.listener = listener
        self.swipe = swipe or SwipeDetector()
        self.open_id = None
        self.direction = 0

    @property
    def is_open(self):
        return self.open_id is not None

    def position(self):
        return resolve_position(self._visible(), self.open_id)

    def current(self):
        images = self._visible()
        position = resolve_position(images, self.open_id)
        return images[position] if position >= 0 else None

    def open(self, image_id):
        images = self._visible()
        new_position = resolve_position(images, image_id)
        if new_position < 0:
            logger.info('Photo {} is not in the gallery, closing the lightbox', image_id)
            self.close(remember=False)
            return None
        if image_id == self.open_id:
            return images[new_position]

        old_position = resolve_position(images, self.open_id)
        self.direction = _sign(new_position - old_position) if old_position >= 0 else 0
        self.open_id = image_id
        self.url_state.push_photo(image_id)
        self._notify(images[new_position])
        return images[new_position]

    def close(self, remember=True):
        if self.open_id is not None and remember:
            self.scroll_memory.remember(self.open_id)
        was_open = self.open_id is not None
        self.open_id = None
        self.direction = 0
        self.url_state.push_list()
        if was_open:
            self._notify(None)

    def ensure_valid(self):
        """Close when the open photo is no longer visible. Returns `is_open`."""
        if self.open_id is not None and self.position() < 0:
            logger.info('Open photo {} vanished, closing the lightbox', self.open_id)
            self.close(remember=False)
        return self.is_open

    def _step(self, offset):
        images = self._visible()
        position = resolve_position(images, self.open_id)
        if position < 0:
            self.ensure_valid()
            return None
        target = position + offset
        if target < 0 or target >= len(images):
            return None
        return self.open(images[target].id)

    def next(self):
        return self._step(1)

    def previous(self):
        return self._step(-1)

    def has_next(self):
        position = self.position()
        return 0 <= position < len(self._visible()) - 1

    def has_previous(self):
        return self.position() > 0

    def handle_key(self, key):
        if not self.is_open:
            return False
        if key == KEY_NEXT:
            self.next()
        elif key == KEY_PREVIOUS:
            self.previous()
        elif key == KEY_CLOSE:
            self.close()
        else:
            return False
        return True

    def handle_swipe(self, dx, dy, pointer='touch'):
        if not self.is_open:
            return False
        gesture = self.swipe.classify(dx, dy, pointer)
        if gesture == 'left':
            self.next()
        elif gesture == 'right':
            self.previous()
        else:
            return False
        return True

    def _notify(self, image):
        if self.listener is not None:
            self.listener(image)
