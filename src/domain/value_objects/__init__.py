"""Domain value objects."""

from src.domain.value_objects.catalog import Catalog
from src.domain.value_objects.conversation import ConversationTurn, ResolvedConversation
from src.domain.value_objects.integrity_issue import (
    IntegrityIssue,
    IssueKind,
    IssueSeverity,
)
from src.domain.value_objects.partition_load_result import (
    PartitionLoadResult,
    PartitionStatus,
)


__all__ = [
    "Catalog",
    "ConversationTurn",
    "IntegrityIssue",
    "IssueKind",
    "IssueSeverity",
    "PartitionLoadResult",
    "PartitionStatus",
    "ResolvedConversation",
]
