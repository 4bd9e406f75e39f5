"""Vector store exceptions for ragchat."""

from .base import RagChatError


class VectorStoreError(RagChatError):
    """Base error for vector store operations."""

    error_code = "RC_VEC_001"


class VectorStoreNotInitializedError(VectorStoreError):
    """The store was used before ``initialize()`` loaded its snapshot."""

    error_code = "RC_VEC_002"


class VectorStoreCorruptError(VectorStoreError):
    """The persisted snapshot exists but cannot be parsed.

    Raised at initialization only. The store refuses to start empty on top of
    a snapshot it cannot read.
    """

    error_code = "RC_VEC_003"


class VectorStorePersistenceError(VectorStoreError):
    """Writing the snapshot failed during a mutation.

    Common causes:
    - Data directory is read-only
    - Disk is full
    """

    error_code = "RC_VEC_004"
