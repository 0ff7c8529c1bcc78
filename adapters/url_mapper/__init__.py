from .disi_url_mapper import DisiUrlMapper
from .prefix_url_mapper import UrlMapper

__all__ = [
    "DisiUrlMapper",
    "UrlMapper",
]
