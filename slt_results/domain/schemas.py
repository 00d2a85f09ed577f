"""
Data schemas for normalized query output.

- ColumnType values are the single-character tags written to expectation files
- QueryOutput is either a completed statement or a row matrix with types
"""

from dataclasses import dataclass, field
from enum import Enum

# =============================================================================
# Column Type
# =============================================================================

class ColumnType(str, Enum):
    """
    Coarse logical category of a result column.

    The value of each member is its expectation-file tag.
    """
    BOOLEAN = "B"
    DATETIME = "D"
    INTEGER = "I"
    TIMESTAMP = "P"
    FLOAT = "R"
    TEXT = "T"
    OTHER = "?"

    def to_char(self) -> str:
        """Single-character tag."""
        return self.value

    @classmethod
    def from_char(cls, value: str) -> "ColumnType":
        """
        Parse a tag character.

        Tags written by other producers are accepted and read as OTHER.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


def types_to_string(types: list[ColumnType]) -> str:
    """Encode column types as a tag string (e.g. "ITR")."""
    return "".join(t.to_char() for t in types)


def types_from_string(tags: str) -> list[ColumnType]:
    """Decode a tag string into column types, one per character."""
    return [ColumnType.from_char(c) for c in tags]


# =============================================================================
# Query Output
# =============================================================================

@dataclass(frozen=True)
class StatementComplete:
    """A query that produced neither columns nor rows."""
    count: int = 0


@dataclass
class Rows:
    """Normalized result set."""
    types: list[ColumnType] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "types": types_to_string(self.types),
            "rows": [list(row) for row in self.rows],
        }


QueryOutput = StatementComplete | Rows
