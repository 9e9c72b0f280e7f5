"""Shortlink resolution.

Composes the pipeline: split the request path, normalize the key, ask the
caller's lookup for the stored long URL, expand it against the remaining
path. The lookup is injected per call; the resolver holds no state, makes
no I/O of its own, and calls the lookup at most once per resolution.

Usage::

    import golink

    links = {"prs": "https://github.com/pulls?q=review-requested:"
                    "{{ if path }}{path}{{ else }}@me{{ endif }}"}

    match golink.resolve("http://go/prs/alice", links.get):
        case golink.RedirectRequest(url=url, shortlink=shortlink):
            ...  # 302 to url, count a click for shortlink
        case golink.MetadataRequest(shortlink=shortlink):
            ...  # describe shortlink
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from golink._internal.invoke import invoke_lookup
from golink.config import DEFAULT_CONFIG, ResolverConfig
from golink.errors import EmptyInput, NotFound, TemplateError
from golink.keys import key_from_segment
from golink.outcomes import MetadataRequest, RedirectRequest, ResolutionOutcome
from golink.paths import split_path
from golink.templating import expand

logger = logging.getLogger("golink.resolver")

Lookup = Callable[[str], str | None]
AsyncLookup = Callable[[str], Awaitable[str | None] | str | None]


@dataclass(frozen=True, slots=True)
class _Parsed:
    """A request split into its normalized key and remaining segments."""

    shortlink: str
    remaining: tuple[str, ...]
    is_metadata_request: bool


def _parse_request(raw: str, config: ResolverConfig) -> _Parsed:
    segments = split_path(raw)
    if not segments:
        raise EmptyInput(f"Invalid shortlink {raw!r}")

    key_segment, *rest = segments
    marker = config.metadata_marker

    # "/foo/+" (marker segment) and "/foo+" (marker suffix) both ask for metadata
    is_metadata_request = segments[-1].endswith(marker)
    if is_metadata_request and len(segments) == 1:
        while key_segment.endswith(marker):
            key_segment = key_segment.removesuffix(marker)

    shortlink = key_from_segment(key_segment)
    if not shortlink:
        raise EmptyInput(f"Invalid shortlink {raw!r}")

    return _Parsed(
        shortlink=shortlink,
        remaining=tuple(rest),
        is_metadata_request=is_metadata_request,
    )


def _redirect(parsed: _Parsed, long_url: str | None, config: ResolverConfig) -> RedirectRequest:
    if long_url is None:
        logger.debug("Shortlink %r not found", parsed.shortlink)
        raise NotFound(parsed.shortlink)

    try:
        url = expand(long_url, parsed.remaining, append_path=config.append_path)
    except TemplateError as exc:
        logger.warning("Shortlink %r has a malformed long URL: %s", parsed.shortlink, exc)
        raise

    logger.debug("Shortlink %r -> %s", parsed.shortlink, url)
    return RedirectRequest(url=url, shortlink=parsed.shortlink)


def resolve(
    raw: str,
    lookup: Lookup,
    *,
    config: ResolverConfig | None = None,
) -> ResolutionOutcome:
    """Resolve *raw* (a URL or bare path) with a synchronous *lookup*.

    *lookup* receives the normalized shortlink and returns the stored long
    URL, or ``None`` when there is none. It is called at most once, and not
    at all for metadata requests.

    Returns ``RedirectRequest`` or ``MetadataRequest``.

    Raises:
        EmptyInput: *raw* has no path segments or its key normalizes to
            nothing.
        NotFound: *lookup* returned ``None``.
        TemplateError: the stored long URL has malformed template syntax.
    """
    config = config or DEFAULT_CONFIG
    parsed = _parse_request(raw, config)

    if parsed.is_metadata_request:
        logger.debug("Metadata request for %r", parsed.shortlink)
        return MetadataRequest(parsed.shortlink)

    long_url = lookup(parsed.shortlink)
    if inspect.isawaitable(long_url):
        if inspect.iscoroutine(long_url):
            long_url.close()
        msg = "resolve() got an async lookup; use resolve_async() instead."
        raise TypeError(msg)
    return _redirect(parsed, long_url, config)


async def resolve_async(
    raw: str,
    lookup: AsyncLookup,
    *,
    config: ResolverConfig | None = None,
) -> ResolutionOutcome:
    """Async variant of ``resolve()`` for lookups backed by async I/O.

    *lookup* may be an ``async def`` function; a plain function runs in a
    worker thread. Same outcomes, same errors, same single lookup call.
    """
    config = config or DEFAULT_CONFIG
    parsed = _parse_request(raw, config)

    if parsed.is_metadata_request:
        logger.debug("Metadata request for %r", parsed.shortlink)
        return MetadataRequest(parsed.shortlink)

    long_url = await invoke_lookup(lookup, parsed.shortlink)
    return _redirect(parsed, long_url, config)


class Resolver:
    """A lookup bound to a config.

    Usage::

        resolver = Resolver(links.get, ResolverConfig(append_path=False))
        outcome = resolver.resolve("/docs/api")
    """

    __slots__ = ("_config", "_lookup")

    def __init__(self, lookup: AsyncLookup, config: ResolverConfig | None = None) -> None:
        self._lookup = lookup
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, raw: str) -> ResolutionOutcome:
        """Resolve *raw* with the bound lookup. The lookup must be synchronous."""
        if inspect.iscoroutinefunction(self._lookup):
            msg = "Resolver.resolve() needs a synchronous lookup; use resolve_async() instead."
            raise TypeError(msg)
        return resolve(raw, self._lookup, config=self._config)  # type: ignore[arg-type]

    async def resolve_async(self, raw: str) -> ResolutionOutcome:
        """Resolve *raw* with the bound lookup, sync or async."""
        return await resolve_async(raw, self._lookup, config=self._config)
