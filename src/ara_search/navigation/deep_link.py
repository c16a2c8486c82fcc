"""
One-shot deep-link synchronization.

Reads the URL fragment once at mount, expands exactly that record and
schedules a best-effort scroll of its element into view. There is no
subscription to later fragment changes.
"""

from typing import Callable, Optional, Protocol

from loguru import logger

from ara_search.navigation.expansion import ExpansionSet
from ara_search.navigation.scheduler import ScheduledCall, Scheduler


class Scrollable(Protocol):
    def scroll_into_view(self, behavior: str = "smooth", block: str = "start") -> None:
        ...


# Element lookup by identifier; None when no such element exists
ElementLocator = Callable[[str], Optional[Scrollable]]


def normalize_fragment(fragment: Optional[str]) -> str:
    """Strip the leading '#' from a location fragment"""
    if not fragment:
        return ""
    return fragment[1:] if fragment.startswith("#") else fragment


class DeepLinkSynchronizer:
    """
    Seeds a surface's expansion set from the location fragment.
    
    The scroll step no-ops if the element is missing or the surface was
    unmounted before the delay elapsed.
    """
    
    def __init__(
        self,
        fragment: Optional[str],
        expansion: ExpansionSet,
        scheduler: Optional[Scheduler] = None,
        locate: Optional[ElementLocator] = None,
        delay: float = 0.1,
    ):
        """
        Initialize synchronizer.
        
        Args:
            fragment: Location fragment read at mount (with or without '#')
            expansion: Expansion set to seed
            scheduler: Runs the delayed scroll; None skips scrolling
            locate: Finds the element for an identifier
            delay: Seconds to wait for layout before scrolling
        """
        self.fragment = normalize_fragment(fragment)
        self.expansion = expansion
        self.scheduler = scheduler
        self.locate = locate
        self.delay = delay
        
        self.has_run = False
        self.disposed = False
        self.scrolled = False
        self._pending: Optional[ScheduledCall] = None
    
    def run(self) -> bool:
        """
        Apply the fragment. Only the first call has any effect.
        
        Returns:
            True if the fragment seeded the expansion set
        """
        if self.has_run:
            return False
        self.has_run = True
        
        if not self.fragment:
            return False
        
        self.expansion.replace({self.fragment})
        logger.debug(f"Deep link expanded {self.fragment!r}")
        
        if self.scheduler is not None and self.locate is not None:
            self._pending = self.scheduler.call_later(self.delay, self._scroll)
        return True
    
    def dispose(self) -> None:
        """Unmount: cancel any pending scroll"""
        self.disposed = True
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
    
    def _scroll(self) -> None:
        self._pending = None
        if self.disposed:
            return
        
        element = self.locate(self.fragment)
        if element is None:
            logger.warning(f"Deep link target not found: {self.fragment!r}")
            return
        
        element.scroll_into_view(behavior="smooth", block="start")
        self.scrolled = True
