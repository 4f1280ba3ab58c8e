from dataclasses import dataclass
from datetime import datetime

USER_UPLOAD_TAG = 'user_uploaded'
APP_TAG = 'image_ground_app'


@dataclass(frozen=True)
class Image:
    """One photo of the catalog.

    `id` is the position in the catalog query result and is only stable for
    the lifetime of one page session.
    """

    id: int
    width: str
    height: str
    remote_key: str
    format: str
    created_at: str
    blur_placeholder: str = ''
    is_user_uploaded: bool = False

    @property
    def aspect_ratio(self):
        try:
            width, height = float(self.width), float(self.height)
        except ValueError:
            return 1.0
        return width / height if height else 1.0

    @property
    def created_label(self):
        """Upload date as shown on the grid badge, e.g. `Oct 17, 2026`."""
        try:
            created = datetime.fromisoformat(self.created_at.replace('Z', '+00:00'))
        except ValueError:
            return ''
        return f"{created.strftime('%b')} {created.day}, {created.year}"

    def to_dict(self):
        return {
            'id': self.id,
            'width': self.width,
            'height': self.height,
            'remoteKey': self.remote_key,
            'format': self.format,
            'createdAt': self.created_at,
            'blurDataUrl': self.blur_placeholder,
            'isUserUploaded': self.is_user_uploaded,
        }


def image_from_resource(index, resource, blur_placeholder=''):
    """Map one search result of the media service onto an `Image`."""
    tags = resource.get('tags') or []
    return Image(
        id=index,
        width=str(resource.get('width', '')),
        height=str(resource.get('height', '')),
        remote_key=resource['public_id'],
        format=resource.get('format', ''),
        created_at=resource.get('created_at', ''),
        blur_placeholder=blur_placeholder,
        is_user_uploaded=USER_UPLOAD_TAG in tags,
    )
