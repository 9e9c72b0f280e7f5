"""Tests for golink.errors — exception hierarchy and error messages."""

import pytest

from golink.errors import (
    ConfigurationError,
    EmptyInput,
    GolinkError,
    NotFound,
    ResolveError,
    TemplateError,
    UnexpectedToken,
    UnterminatedConditional,
)


class TestHierarchy:
    def test_resolve_errors(self) -> None:
        assert issubclass(EmptyInput, ResolveError)
        assert issubclass(NotFound, ResolveError)
        assert issubclass(ResolveError, GolinkError)

    def test_template_errors(self) -> None:
        assert issubclass(UnterminatedConditional, TemplateError)
        assert issubclass(UnexpectedToken, TemplateError)
        assert issubclass(TemplateError, GolinkError)

    def test_template_errors_are_not_resolve_errors(self) -> None:
        assert not issubclass(TemplateError, ResolveError)

    def test_configuration_error_is_golink_error(self) -> None:
        assert issubclass(ConfigurationError, GolinkError)


class TestStatus:
    def test_empty_input_is_400(self) -> None:
        assert EmptyInput().status == 400

    def test_not_found_is_404(self) -> None:
        assert NotFound("foo").status == 404

    def test_template_errors_are_500(self) -> None:
        assert UnterminatedConditional(0).status == 500
        assert UnexpectedToken("{{ else }}", 0).status == 500


class TestMessages:
    def test_empty_input_default(self) -> None:
        assert str(EmptyInput()) == "Invalid input"

    def test_not_found(self) -> None:
        err = NotFound("foo")
        assert err.shortlink == "foo"
        assert str(err) == "Shortlink 'foo' not found"

    def test_not_found_custom_detail(self) -> None:
        assert NotFound("foo", detail="gone").detail == "gone"

    def test_unterminated(self) -> None:
        err = UnterminatedConditional(12)
        assert err.position == 12
        assert str(err) == "Unterminated '{{ if }}' block opened at position 12"

    def test_unexpected_token(self) -> None:
        err = UnexpectedToken("{{ endif }}", 3)
        assert err.token == "{{ endif }}"
        assert "'{{ endif }}' at position 3" in str(err)

    def test_catchable_as_golink_error(self) -> None:
        with pytest.raises(GolinkError):
            raise NotFound("foo")
