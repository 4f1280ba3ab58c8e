"""Environment driven settings."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

MB = 1024 * 1024


def _int_env(name, default):
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {value!r}')


@dataclass(frozen=True)
class Settings:
    cloud_name: str = ''
    api_key: str = ''
    api_secret: str = ''
    folder: str = ''
    max_content_length: int = 16 * MB
    request_timeout: int = 30
    session_capacity: int = 256
    log_dir: str = ''
    log_level: str = 'INFO'

    @property
    def configured(self):
        return bool(self.cloud_name and self.api_key and self.api_secret)

    @classmethod
    def from_env(cls):
        load_dotenv()
        return cls(
            cloud_name=os.getenv('CLOUDINARY_CLOUD_NAME') or os.getenv('NEXT_PUBLIC_CLOUDINARY_CLOUD_NAME', ''),
            api_key=os.getenv('CLOUDINARY_API_KEY', ''),
            api_secret=os.getenv('CLOUDINARY_API_SECRET', ''),
            folder=os.getenv('CLOUDINARY_FOLDER', ''),
            max_content_length=_int_env('GALLERY_MAX_CONTENT_LENGTH', 16 * MB),
            request_timeout=_int_env('GALLERY_REQUEST_TIMEOUT', 30),
            session_capacity=_int_env('GALLERY_SESSION_CAPACITY', 256),
            log_dir=os.getenv('GALLERY_LOG_DIR', ''),
            log_level=os.getenv('GALLERY_LOG_LEVEL', 'INFO'),
        )
