"""Route identity used to locate routing issues."""

from __future__ import annotations

from dataclasses import dataclass

from sitecheck.errors import SourceLocation


@dataclass(frozen=True, slots=True)
class RouteData:
    """A discovered route: its component file, URL pattern, and prerender flag."""

    component: str
    route: str = ""
    prerender: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.component, str) or not self.component.strip():
            raise ValueError("component must be a non-empty string")

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(file=self.component)

    def requires_static_paths(self, *, ssr: bool) -> bool:
        """Statically generated routes must enumerate their parameters."""

        return not ssr or self.prerender


__all__ = ["RouteData"]
