"""Client for the cloud media service that stores and delivers the photos."""

from datetime import datetime, timezone

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import requests
from loguru import logger

from .errors import RemoteError
from .models import APP_TAG, USER_UPLOAD_TAG

DELIVERY_BASE = 'https://res.cloudinary.com'

FULL_RESOLUTION = 'c_fit,w_1920,h_1080'
GRID_RESOLUTION = 'c_scale,w_720'
THUMBNAIL_RESOLUTION = 'c_scale,w_180'
PLACEHOLDER_RESOLUTION = 'c_scale,w_8'

SEARCH_LIMIT = 400

_ERROR_STATUS = {
    cloudinary.exceptions.BadRequest: 400,
    cloudinary.exceptions.AuthorizationRequired: 401,
    cloudinary.exceptions.NotAllowed: 403,
    cloudinary.exceptions.NotFound: 404,
    cloudinary.exceptions.AlreadyExists: 409,
    cloudinary.exceptions.RateLimited: 420,
    cloudinary.exceptions.GeneralError: 500,
}


def build_delivery_url(cloud_name, remote_key, fmt, transformation=None):
    parts = [DELIVERY_BASE, cloud_name, 'image', 'upload']
    if transformation:
        parts.append(transformation)
    parts.append(f'{remote_key}.{fmt}')
    return '/'.join(parts)


def _remote_error(action, e):
    return RemoteError(str(e) or f'{action} failed', status=_ERROR_STATUS.get(type(e)))


class CloudMediaService:
    """Search, upload and destroy go through the Cloudinary SDK.

    Image bytes are read from the public delivery URLs with `requests`.
    """

    def __init__(self, settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()
        self.timeout = settings.request_timeout
        cloudinary.config(
            cloud_name=settings.cloud_name,
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            secure=True,
        )

    @property
    def cloud_name(self):
        return self.settings.cloud_name

    def delivery_url(self, image, transformation=None):
        return build_delivery_url(self.cloud_name, image.remote_key, image.format, transformation)

    def search(self, folder=None, limit=SEARCH_LIMIT):
        """Return raw resources under `folder`, newest identifier first."""
        folder = self.settings.folder if folder is None else folder
        expression = f'folder:{folder}/*'
        try:
            result = (
                cloudinary.Search()
                .expression(expression)
                .sort_by('public_id', 'desc')
                .max_results(limit)
                .with_field('tags')
                .execute(timeout=self.timeout)
            )
        except cloudinary.exceptions.Error as e:
            raise _remote_error('Search', e) from e
        resources = list(result.get('resources', []))
        logger.debug('Search {} returned {} resources', expression, len(resources))
        return resources

    def upload(self, data_uri):
        """Upload a base64 data URI and return the new resource metadata."""
        try:
            result = cloudinary.uploader.upload(
                data_uri,
                folder=self.settings.folder,
                resource_type='auto',
                tags=[USER_UPLOAD_TAG, APP_TAG],
                context={
                    'source': APP_TAG,
                    'uploaded_at': datetime.now(timezone.utc).isoformat(),
                },
                timeout=self.timeout,
            )
        except cloudinary.exceptions.Error as e:
            raise _remote_error('Upload', e) from e
        logger.info('Uploaded {} to the media service', result.get('public_id'))
        return dict(result)

    def destroy(self, remote_key):
        """Delete one image. Returns `'ok'` or `'not found'`."""
        try:
            payload = cloudinary.uploader.destroy(remote_key, timeout=self.timeout)
        except cloudinary.exceptions.Error as e:
            raise _remote_error('Delete', e) from e
        result = payload.get('result')
        if result not in ('ok', 'not found'):
            raise RemoteError(f'Unexpected destroy result: {result!r}')
        return result

    def fetch(self, url):
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RemoteError(f'Failed to fetch {url}: {e}') from e
        return response.content

    def stream(self, url):
        """Open a streaming GET; the caller closes the response."""
        try:
            response = self.session.get(url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            raise RemoteError(f'Failed to fetch {url}: {e}') from e
        if not response.ok:
            response.close()
            raise RemoteError(f'Failed to fetch {url}: HTTP {response.status_code}', status=response.status_code)
        return response
