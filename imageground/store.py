import threading
from dataclasses import dataclass


@dataclass
class UploadProgress:
    uploading: bool = False
    message: str = ''


class GalleryStore:
    """Catalog of one page session minus the images deleted in it.

    The catalog never changes after construction and removed ids are never
    restored; a new page load builds a new store.
    """

    def __init__(self, catalog):
        self._catalog = tuple(catalog)
        self._removed = set()
        self._lock = threading.RLock()
        self.upload = UploadProgress()

    @property
    def catalog(self):
        return self._catalog

    @property
    def removed_ids(self):
        with self._lock:
            return frozenset(self._removed)

    def visible(self):
        with self._lock:
            return [image for image in self._catalog if image.id not in self._removed]

    def find(self, image_id):
        for image in self.visible():
            if image.id == image_id:
                return image
        return None

    def remove(self, image_id):
        """Hide `image_id`; returns False when it was already hidden."""
        with self._lock:
            if image_id in self._removed:
                return False
            self._removed.add(image_id)
            return True

    def begin_upload(self, message):
        with self._lock:
            self.upload = UploadProgress(uploading=True, message=message)

    def set_upload_progress(self, message):
        with self._lock:
            self.upload = UploadProgress(uploading=self.upload.uploading, message=message)

    def finish_upload(self, message):
        with self._lock:
            self.upload = UploadProgress(uploading=False, message=message)

    def end_upload(self):
        with self._lock:
            self.upload = UploadProgress()
