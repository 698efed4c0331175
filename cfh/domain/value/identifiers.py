"""Strongly typed identifiers for domain entities.

Identities are integers assigned by the content store at creation time and
increase monotonically per entity kind.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
MemeId = NewType("MemeId", int)
CommentId = NewType("CommentId", int)
ResourceId = NewType("ResourceId", int)
GameSessionId = NewType("GameSessionId", int)
