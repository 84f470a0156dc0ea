"""Path patterns — typed Literal and Capture segments.

A pattern such as ``/best-sellers`` or ``/:slug`` is parsed once, at
registration time, into a tuple of segment variants. Matching walks the
tuple against the request path segments; there is no regex involved.
"""

from dataclasses import dataclass
from typing import TypeAlias

from storefront.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that must equal the request segment exactly."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Capture:
    """A segment that binds any single non-empty request segment to ``name``."""

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


Segment: TypeAlias = Literal | Capture


def parse_pattern(pattern: str) -> tuple[Segment, ...]:
    """Parse a route pattern into segments.

    Examples::

        "/"              -> ()
        "/best-sellers"  -> (Literal("best-sellers"),)
        "/:slug"         -> (Capture("slug"),)
        "/:slug/reviews" -> (Capture("slug"), Literal("reviews"))

    Raises ``ConfigurationError`` for a capture without a name (``/:``).
    """
    segments: list[Segment] = []
    for part in pattern.strip("/").split("/"):
        if not part:
            continue
        if part.startswith(":"):
            name = part[1:]
            if not name:
                msg = f"Capture segment in {pattern!r} needs a name, e.g. ':slug'."
                raise ConfigurationError(msg)
            segments.append(Capture(name))
        else:
            segments.append(Literal(part))
    return tuple(segments)


def split_path(path: str) -> list[str]:
    """Split a request path into segments.

    Trailing slashes are ignored, so ``/featured/`` and ``/featured`` are
    the same path. Interior empty segments are kept so that they can never
    satisfy a capture.
    """
    trimmed = path.rstrip("/")
    if not trimmed:
        return []
    return trimmed.removeprefix("/").split("/")


def match_segments(
    segments: tuple[Segment, ...],
    parts: list[str],
) -> dict[str, str] | None:
    """Match pattern segments against request path parts.

    Returns the captured parameters, or ``None`` if the path does not match.
    """
    if len(segments) != len(parts):
        return None
    params: dict[str, str] = {}
    for segment, part in zip(segments, parts, strict=True):
        match segment:
            case Literal(value):
                if part != value:
                    return None
            case Capture(name):
                if not part:
                    return None
                params[name] = part
    return params


def format_pattern(segments: tuple[Segment, ...]) -> str:
    """Render segments back into pattern syntax (``/`` for the root)."""
    return "/" + "/".join(str(s) for s in segments)
