"""Protocol interfaces for temporal values, fields and units.

Built-in ``ChronoField`` / ``ChronoUnit`` members satisfy these protocols
and are handled on a fast path.  Any other object that satisfies them is
treated as a custom field or unit and delegated to.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to the fields of a temporal value."""

    def is_supported(self, field: Any) -> bool: ...

    def get(self, field: Any) -> int: ...


@runtime_checkable
class TemporalField(Protocol):
    """A field that knows how to read and adjust itself on a temporal."""

    def is_supported_by(self, temporal: Any) -> bool: ...

    def get_from(self, temporal: Any) -> int: ...

    def adjust_into(self, temporal: Any, new_value: int) -> Any: ...


@runtime_checkable
class TemporalUnit(Protocol):
    """A unit that knows how to add itself to, and measure between, temporals."""

    def is_supported_by(self, temporal: Any) -> bool: ...

    def add_to(self, temporal: Any, amount: int) -> Any: ...

    def between(self, start: Any, end: Any) -> int: ...
