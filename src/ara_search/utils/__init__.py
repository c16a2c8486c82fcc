"""Utils package exports"""

from ara_search.utils.logger import setup_logger
from ara_search.utils.text import casefold, preview

__all__ = [
    "setup_logger",
    "casefold",
    "preview",
]
