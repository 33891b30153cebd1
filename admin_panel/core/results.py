from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class FetchResult(BaseModel, Generic[T]):
    """Outcome of a list read. An empty list and a failed read stay distinguishable here."""
    rows: List[T] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def rows_or_empty(self) -> List[T]:
        return self.rows if self.ok else []
