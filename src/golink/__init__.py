"""Golink — resolve go/ shortlinks to long URLs.

An engine for link shortening services: you provide the link to expand and
a function mapping a shortlink to its stored long URL; golink normalizes
the shortlink, calls your function, and expands the result.

- **Case and hyphens are ignored**: ``go/My-Service`` and ``go/myservice``
  look up the same key.
- **Secondary paths are appended**: if ``foo`` maps to
  ``http://example.com``, then ``go/foo/bar/baz`` resolves to
  ``http://example.com/bar/baz``.
- **Long URLs can be templates**::

      https://github.com/pulls?q=review-requested:{{ if path }}{path}{{ else }}@me{{ endif }}

  ``go/prs`` fills in ``@me``; ``go/prs/alice`` fills in ``alice``.

Basic usage::

    import golink

    outcome = golink.resolve("http://go/foo/bar", {"foo": "http://example.com"}.get)
    # RedirectRequest(url="http://example.com/bar", shortlink="foo")

Async lookups::

    outcome = await golink.resolve_async("/foo", fetch_long_url)

Storage, HTTP serving, and analytics are left to the caller.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "EmptyInput",
    "GolinkError",
    "MetadataRequest",
    "NotFound",
    "RedirectRequest",
    "ResolveError",
    "Resolver",
    "ResolverConfig",
    "TemplateError",
    "UnexpectedToken",
    "UnterminatedConditional",
    "expand",
    "normalize_key",
    "normalize_shortlink",
    "parse_template",
    "resolve",
    "resolve_async",
    "split_path",
    "validate_template",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "golink.errors",
    "EmptyInput": "golink.errors",
    "GolinkError": "golink.errors",
    "NotFound": "golink.errors",
    "ResolveError": "golink.errors",
    "TemplateError": "golink.errors",
    "UnexpectedToken": "golink.errors",
    "UnterminatedConditional": "golink.errors",
    "MetadataRequest": "golink.outcomes",
    "RedirectRequest": "golink.outcomes",
    "Resolver": "golink.resolver",
    "resolve": "golink.resolver",
    "resolve_async": "golink.resolver",
    "ResolverConfig": "golink.config",
    "expand": "golink.templating.engine",
    "parse_template": "golink.templating.engine",
    "validate_template": "golink.templating.engine",
    "normalize_key": "golink.keys",
    "normalize_shortlink": "golink.keys",
    "split_path": "golink.paths",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import golink`` fast (anyio is only loaded with the resolver)
    while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
