class GalleryError(Exception):
    """Base class for every failure the gallery reports."""


class ValidationError(GalleryError):
    """An upload was rejected before any request was sent."""


class NotFoundError(GalleryError):
    def __init__(self, image_id):
        self.image_id = image_id
        super().__init__(f'Image {image_id} not found for deletion')


class RemoteError(GalleryError):
    """A call to the cloud media service failed."""

    def __init__(self, message, status=None):
        self.status = status
        super().__init__(message)


class LoadError(GalleryError):
    def __init__(self, image_id, reason='Failed to load image'):
        self.image_id = image_id
        self.reason = reason
        super().__init__(reason)
