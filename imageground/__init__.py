"""IMAGE GROUND: a cloud-backed photo gallery with a server-driven lightbox."""

__version__ = '1.0.0'
