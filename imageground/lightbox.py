"""The lightbox of one page session.

Wires navigation, image loading and deletion together and renders their
combined state as the JSON view the page draws.
"""

from loguru import logger

from .deletion import DeleteFlow
from .loading import ImageLoadStateMachine, LoadStatus
from .media import FULL_RESOLUTION, GRID_RESOLUTION, THUMBNAIL_RESOLUTION
from .navigation import NavigationController, ScrollMemory, UrlState, thumbnail_window


class Lightbox:
    def __init__(self, store, media, executor, url_state=None, scroll_memory=None):
        self.store = store
        self.media = media
        self.navigation = NavigationController(
            store.visible,
            url_state=url_state or UrlState(),
            scroll_memory=scroll_memory or ScrollMemory(),
            listener=self._on_navigate,
        )
        self.loader = ImageLoadStateMachine(
            lambda image: media.delivery_url(image, FULL_RESOLUTION),
            issue=self._on_request,
        )
        self.deletion = DeleteFlow(store, self.navigation, media.destroy, executor)

    def _on_navigate(self, image):
        self.deletion.cancel()
        if image is None:
            self.loader.reset()
        else:
            self.loader.start(image)

    def _on_request(self, request):
        logger.debug('Loading photo {} (token {})', request.image_id, request.token)

    # actions

    def open(self, image_id):
        return self.navigation.open(image_id)

    def close(self):
        self.navigation.close()

    def next(self):
        return self.navigation.next()

    def previous(self):
        return self.navigation.previous()

    def key(self, key):
        return self.navigation.handle_key(key)

    def swipe(self, dx, dy, pointer='touch'):
        return self.navigation.handle_swipe(dx, dy, pointer)

    def loaded(self, token):
        return self.loader.succeed(token)

    def failed(self, token, reason='Failed to load image'):
        return self.loader.fail(token, reason)

    def retry(self):
        return self.loader.retry()

    def request_delete(self):
        if not self.loader.chrome_visible:
            return False
        return self.deletion.request()

    def cancel_delete(self):
        self.deletion.cancel()

    def confirm_delete(self):
        return self.deletion.confirm()

    def delete(self, image_id):
        return self.deletion.delete(image_id)

    # rendering

    def _image_view(self, image):
        data = image.to_dict()
        data['src'] = self.media.delivery_url(image, FULL_RESOLUTION)
        data['gridSrc'] = self.media.delivery_url(image, GRID_RESOLUTION)
        data['originalSrc'] = self.media.delivery_url(image)
        return data

    def view(self):
        """Current state as JSON-ready data. Closes on a vanished photo first."""
        url_state = self.navigation.url_state
        if not self.navigation.ensure_valid():
            return {
                'open': False,
                'photoId': None,
                'url': url_state.url,
                'displayUrl': url_state.display_url,
                'scrollTo': self.navigation.scroll_memory.consume(),
            }

        images = self.store.visible()
        current = self.navigation.current()
        loader = self.loader
        chrome = loader.chrome_visible
        return {
            'open': True,
            'photoId': current.id,
            'url': url_state.url,
            'displayUrl': url_state.display_url,
            'direction': self.navigation.direction,
            'image': self._image_view(current),
            'status': loader.status.value,
            'load': loader.request.to_dict() if loader.status is LoadStatus.LOADING else None,
            'error': str(loader.error) if loader.error else None,
            'chrome': chrome,
            'hasPrevious': chrome and self.navigation.has_previous(),
            'hasNext': chrome and self.navigation.has_next(),
            'confirmDelete': self.deletion.confirming,
            'thumbnails': [
                {
                    'id': image.id,
                    'src': self.media.delivery_url(image, THUMBNAIL_RESOLUTION),
                    'current': image.id == current.id,
                }
                for image in thumbnail_window(images, current.id)
            ] if chrome else [],
        }
