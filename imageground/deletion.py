"""Confirmed delete: hide locally at once, delete remotely in the background."""

from loguru import logger

from .errors import NotFoundError, RemoteError


class DeleteFlow:
    def __init__(self, store, navigation, remote_delete, executor):
        self.store = store
        self.navigation = navigation
        self.remote_delete = remote_delete
        self.executor = executor
        self.confirming = False

    def request(self):
        """Show the confirmation dialog for the open photo."""
        if not self.navigation.is_open:
            return False
        self.confirming = True
        return True

    def cancel(self):
        self.confirming = False

    def confirm(self):
        if not self.confirming:
            return None
        self.confirming = False
        return self.delete(self.navigation.open_id)

    def delete(self, image_id):
        """Hide `image_id` and close the lightbox; returns the remote task.

        The local removal is final. The remote outcome is only logged.
        """
        image = self.store.find(image_id)
        if image is None:
            logger.error('Image {} not found for deletion', image_id)
            raise NotFoundError(image_id)

        self.store.remove(image_id)
        self.navigation.close(remember=False)

        logger.info('Deleting {} (id {}) in the background', image.remote_key, image_id)
        future = self.executor.submit(self._delete_remote, image)
        future.add_done_callback(_log_unexpected)
        return future

    def _delete_remote(self, image):
        try:
            result = self.remote_delete(image.remote_key)
        except RemoteError as e:
            logger.warning('Background delete of {} failed: {}', image.remote_key, e)
            return 'failed'
        if result == 'not found':
            logger.info('{} was already gone from the media service', image.remote_key)
        else:
            logger.info('Deleted {} from the media service', image.remote_key)
        return result


def _log_unexpected(future):
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.opt(exception=error).error('Background delete crashed')
