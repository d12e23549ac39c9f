"""Data model of the console: collections, properties, records and paging."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .core.values import Value

# Synthetic key carrying the service-assigned object id in every RecordRow
IDENTITY_FIELD = "identity"

RecordRow = Dict[str, Value]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class PropertyInfo:
    """
    One property declared on a collection.

    Attributes:
        name: Property name
        data_type: Type tags; the first one is the primary type
        description: Optional description
        is_reference: True for cross-references, whose tags are target collections
    """
    name: str
    data_type: List[str] = field(default_factory=list)
    description: Optional[str] = None
    is_reference: bool = False

    @property
    def primary_type(self) -> Optional[str]:
        return self.data_type[0] if self.data_type else None

    @property
    def is_date_typed(self) -> bool:
        """True if any type tag is date-like ('date' or 'date[]')."""
        return any(tag.startswith("date") for tag in self.data_type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "dataType": list(self.data_type),
        }


@dataclass
class CollectionInfo:
    """
    One collection with its schema and a best-effort object count.

    ``count`` may be stale and is 0 when the count lookup failed.
    """
    name: str
    description: Optional[str] = None
    count: int = 0
    properties: List[PropertyInfo] = field(default_factory=list)

    def get_property(self, name: str) -> Optional[PropertyInfo]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @property
    def property_names(self) -> List[str]:
        return [prop.name for prop in self.properties]

    @property
    def value_property_names(self) -> List[str]:
        """Names of properties that can be returned as values (cross-references excluded)."""
        return [prop.name for prop in self.properties if not prop.is_reference]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "count": self.count,
            "properties": [prop.to_dict() for prop in self.properties],
        }


@dataclass(frozen=True)
class SortSpec:
    property: str
    order: SortOrder = SortOrder.ASC

    @property
    def ascending(self) -> bool:
        return self.order == SortOrder.ASC


@dataclass(frozen=True)
class PageRequest:
    """A window of rows: ``limit`` rows starting at ``offset``."""
    limit: int
    offset: int = 0

    def next(self, returned: int) -> 'PageRequest':
        """Page following one that returned ``returned`` rows."""
        return PageRequest(limit=self.limit, offset=self.offset + returned)


@dataclass
class TenantInfo:
    name: str
    activity_status: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "activityStatus": self.activity_status}


def has_more(rows: List[RecordRow], limit: int) -> bool:
    """More data may be available iff a full page came back."""
    return len(rows) >= limit


@dataclass
class Page:
    """Rows returned for one PageRequest."""
    rows: List[RecordRow]
    request: PageRequest

    @property
    def has_more(self) -> bool:
        return has_more(self.rows, self.request.limit)

    @property
    def next_offset(self) -> int:
        return self.request.next(len(self.rows)).offset

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.rows,
            "hasMore": self.has_more,
            "nextOffset": self.next_offset,
        }
