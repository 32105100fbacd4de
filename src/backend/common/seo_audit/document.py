from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence


class DocumentAccessError(RuntimeError):
    """Raised by an accessor when the document cannot be queried at all."""


@dataclass(frozen=True)
class Geometry:
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class NavigationTiming:
    navigation_start: float
    load_event_end: float

    @property
    def load_time_ms(self) -> float:
        return self.load_event_end - self.navigation_start


class DocumentAccessor(Protocol):
    """Read-only view over one parsed page snapshot.

    Elements are opaque handles; rules only hand them back to the accessor.
    """

    def query_all(self, selector: str) -> Sequence[Any]: ...

    def get_tag_name(self, element: Any) -> str: ...

    def get_attribute(self, element: Any, name: str) -> Optional[str]: ...

    def get_text_content(self, element: Any) -> str: ...

    def get_computed_style(self, element: Any, prop: str) -> str: ...

    def get_bounding_geometry(self, element: Any) -> Geometry: ...

    def get_navigation_timing(self) -> Optional[NavigationTiming]: ...

    def current_hostname(self) -> str: ...
