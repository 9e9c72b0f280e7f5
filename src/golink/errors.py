"""Golink exception hierarchy.

Shared across the splitter, resolver, and template engine so every module
raises and catches the same types. Each error carries the HTTP status a
web layer should answer with.
"""


class GolinkError(Exception):
    """Base for all golink-specific errors."""

    status: int = 500

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        return self.detail


class ConfigurationError(GolinkError):
    """Raised when a ``ResolverConfig`` is invalid."""


class ResolveError(GolinkError):
    """A failure caused by the request rather than the stored data."""


class EmptyInput(ResolveError):  # noqa: N818 — named for the condition, like NotFound
    """400 — the input has no path segments, or the key normalizes to nothing."""

    status = 400

    def __init__(self, detail: str = "Invalid input") -> None:
        super().__init__(detail)


class NotFound(ResolveError):  # noqa: N818 — conventional name in web frameworks
    """404 — the lookup returned nothing for the normalized shortlink."""

    status = 404

    def __init__(self, shortlink: str, detail: str = "") -> None:
        self.shortlink = shortlink
        super().__init__(detail or f"Shortlink {shortlink!r} not found")


class TemplateError(GolinkError):
    """500 — a stored long URL has malformed template syntax.

    This is a data integrity problem, not the requester's fault.
    """

    status = 500


class UnterminatedConditional(TemplateError):
    """An ``{{ if path }}`` block was never closed with ``{{ endif }}``."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Unterminated '{{{{ if }}}}' block opened at position {position}")


class UnexpectedToken(TemplateError):
    """An ``{{ else }}`` or ``{{ endif }}`` appeared with no open block."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Unexpected {token!r} at position {position}")
