"""
Batch operation result tracking.

Reference: https://docs.weaviate.io/weaviate/manage-objects/import
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class BatchResult:
    """
    Result of a batch insert with success/failure tracking.

    Attributes:
        total: Number of objects sent
        successful: Number of objects stored
        failed: Number of objects rejected
        errors: One dict per rejected object with 'index' and 'message'
    """
    total: int
    successful: int
    failed: int
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_insert_many(cls, total: int, response: Any) -> 'BatchResult':
        """Build from a typed-client insert_many() return value."""
        errors = [
            {"index": index, "message": getattr(error, "message", str(error))}
            for index, error in sorted((getattr(response, "errors", None) or {}).items())
        ]
        return cls(total=total, successful=total - len(errors), failed=len(errors), errors=errors)

    @property
    def success_rate(self) -> float:
        """Success rate from 0.0 to 100.0."""
        return (self.successful / self.total * 100) if self.total > 0 else 0.0

    @property
    def has_errors(self) -> bool:
        return self.failed > 0

    def __str__(self) -> str:
        return (
            f"BatchResult(total={self.total}, "
            f"successful={self.successful}, "
            f"failed={self.failed}, "
            f"success_rate={self.success_rate:.1f}%)"
        )
