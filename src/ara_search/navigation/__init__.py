"""Selection state shared by the surfaces: expansion, deep links, scheduling."""

from ara_search.navigation.expansion import ExpansionSet
from ara_search.navigation.scheduler import CooperativeScheduler, ScheduledCall, Scheduler
from ara_search.navigation.deep_link import (
    DeepLinkSynchronizer,
    ElementLocator,
    Scrollable,
    normalize_fragment,
)

__all__ = [
    "ExpansionSet",
    "CooperativeScheduler",
    "ScheduledCall",
    "Scheduler",
    "DeepLinkSynchronizer",
    "ElementLocator",
    "Scrollable",
    "normalize_fragment",
]
