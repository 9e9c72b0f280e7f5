"""Resolution outcomes — what a successful ``resolve()`` hands back.

A web layer typically answers ``RedirectRequest`` with a 302 to ``url`` and
``MetadataRequest`` with a JSON description of the shortlink.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RedirectRequest:
    """Redirect the requester to the fully expanded ``url``.

    ``shortlink`` is the normalized key that resolved, for click counting.
    """

    url: str
    shortlink: str


@dataclass(frozen=True, slots=True)
class MetadataRequest:
    """The requester asked about ``shortlink`` itself (trailing ``+``)."""

    shortlink: str


ResolutionOutcome = RedirectRequest | MetadataRequest
