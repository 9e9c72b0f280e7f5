"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, shareable
across threads, no string-key dict lookups.
"""

from dataclasses import dataclass

from golink.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(metadata_marker="!", append_path=False)
    """

    # Trailing marker that turns a request into a metadata request ("/foo+")
    metadata_marker: str = "+"

    # Append remaining path segments to long URLs that carry no template tags
    append_path: bool = True

    def __post_init__(self) -> None:
        if not self.metadata_marker:
            msg = "metadata_marker must be a non-empty string."
            raise ConfigurationError(msg)
        if "/" in self.metadata_marker:
            msg = f"metadata_marker {self.metadata_marker!r} cannot contain '/'."
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ResolverConfig()
