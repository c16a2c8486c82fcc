"""
ARA Standard search engine.

In-memory indexing, free-text matching, faceted filtering and result
assembly over the static standard, control and registry collections.
"""

__version__ = "1.0.0"
