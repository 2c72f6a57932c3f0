"""Unit tests for the exception hierarchy."""

from urlbat.exceptions import MissingPathParameterError, UrlbatConfigError, UrlbatError


class TestExceptions:
    """Test urlbat exceptions."""

    def test_base_message_without_context(self):
        exc = UrlbatError("boom")

        assert str(exc) == "boom"
        assert exc.context == {}

    def test_base_message_with_context(self):
        exc = UrlbatError("boom", context={"a": 1, "b": "x"})

        assert str(exc) == "boom (a=1; b=x)"

    def test_missing_path_parameter(self):
        exc = MissingPathParameterError(
            "Path parameter 'id' has no value", parameter="id", template="/u/:id"
        )

        assert isinstance(exc, UrlbatError)
        assert exc.parameter == "id"
        assert str(exc) == "Path parameter 'id' has no value (parameter=id; template=/u/:id)"

    def test_long_template_truncated_in_context(self):
        template = "/" + "x" * 300
        exc = MissingPathParameterError("m", parameter="p", template=template)

        assert len(exc.context["template"]) == 100
        assert exc.template == template

    def test_config_error(self):
        exc = UrlbatConfigError("bad", config_path="/etc/urlbat.yaml")

        assert isinstance(exc, UrlbatError)
        assert exc.context == {"config_path": "/etc/urlbat.yaml"}
