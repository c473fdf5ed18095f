"""
Columnar schema model for consolidation.

TableSchema wraps a pyarrow.Schema as an ordered list of Fields and
provides the compatibility predicate used by the validator:
same length and, per position, equal name, type and nullability.
Key/value metadata (e.g. pandas metadata) is ignored.
"""

from dataclasses import dataclass
from typing import Iterator, Literal, Optional

import pyarrow as pa

DiffKind = Literal["missing", "extra", "name", "type", "nullability"]


@dataclass(frozen=True)
class Field:
    """Single column descriptor. Immutable once read from a file."""

    name: str
    type: pa.DataType
    nullable: bool

    @classmethod
    def from_arrow(cls, field: pa.Field) -> "Field":
        return cls(name=field.name, type=field.type, nullable=field.nullable)

    def __str__(self) -> str:
        suffix = "" if self.nullable else " not null"
        return f"{self.name}: {self.type}{suffix}"


@dataclass(frozen=True)
class FieldDiff:
    """One positional difference between a reference and a candidate schema."""

    position: int
    kind: DiffKind
    expected: Optional[Field]
    actual: Optional[Field]

    def describe(self) -> str:
        """
        Human-readable description.

        Examples:
            >>> diff.describe()
            "Field 1 'value': type mismatch (expected double, got float)"
        """
        if self.kind == "missing":
            return f"Field {self.position}: missing field '{self.expected}'"
        if self.kind == "extra":
            return f"Field {self.position}: unexpected extra field '{self.actual}'"
        if self.kind == "name":
            return (
                f"Field {self.position}: name mismatch "
                f"(expected '{self.expected.name}', got '{self.actual.name}')"
            )
        if self.kind == "type":
            return (
                f"Field {self.position} '{self.expected.name}': type mismatch "
                f"(expected {self.expected.type}, got {self.actual.type})"
            )
        return (
            f"Field {self.position} '{self.expected.name}': nullability mismatch "
            f"(expected nullable={self.expected.nullable}, "
            f"got nullable={self.actual.nullable})"
        )


class TableSchema:
    """
    Ordered field list of a parquet file.

    Keeps the source pyarrow.Schema so the consolidated file can be
    written with exactly the reference schema (metadata included).
    """

    def __init__(self, arrow_schema: pa.Schema) -> None:
        self._arrow = arrow_schema
        self.fields: tuple[Field, ...] = tuple(
            Field.from_arrow(f) for f in arrow_schema
        )

    def to_arrow(self) -> pa.Schema:
        return self._arrow

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def diff(self, other: "TableSchema") -> list[FieldDiff]:
        """
        Compare against another schema position by position.

        Returns:
            One FieldDiff per differing position, empty if compatible.
            A field whose name differs is reported only as a name
            mismatch, even if its type also differs.
        """
        diffs: list[FieldDiff] = []

        for i in range(max(len(self.fields), len(other.fields))):
            expected = self.fields[i] if i < len(self.fields) else None
            actual = other.fields[i] if i < len(other.fields) else None

            if actual is None:
                diffs.append(FieldDiff(i, "missing", expected, None))
            elif expected is None:
                diffs.append(FieldDiff(i, "extra", None, actual))
            elif expected.name != actual.name:
                diffs.append(FieldDiff(i, "name", expected, actual))
            elif not expected.type.equals(actual.type):
                diffs.append(FieldDiff(i, "type", expected, actual))
            elif expected.nullable != actual.nullable:
                diffs.append(FieldDiff(i, "nullability", expected, actual))

        return diffs

    def is_compatible(self, other: "TableSchema") -> bool:
        """Check whether another schema can be appended under this one."""
        if len(self.fields) != len(other.fields):
            return False
        return not self.diff(other)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableSchema):
            return NotImplemented
        return self.is_compatible(other)

    def __hash__(self) -> int:
        return hash(tuple((f.name, str(f.type), f.nullable) for f in self.fields))

    def __repr__(self) -> str:
        return f"TableSchema([{', '.join(str(f) for f in self.fields)}])"
