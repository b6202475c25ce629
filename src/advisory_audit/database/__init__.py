"""
Advisory database collaborators: the query builder, the database protocol
and an in-memory reference implementation.
"""

from .query import Query
from .protocol import AdvisoryDatabase, CommitInfo, HistoryProvider, has_history
from .memory import HistoryDatabase, InMemoryDatabase, VersionMatcher, exact_version_matcher

__all__ = [
    'Query',
    'AdvisoryDatabase',
    'CommitInfo',
    'HistoryProvider',
    'has_history',
    'HistoryDatabase',
    'InMemoryDatabase',
    'VersionMatcher',
    'exact_version_matcher',
]
