"""Unit tests for core/render.py"""

import pytest

from tmpldiff.core.errors import RenderError
from tmpldiff.core.render import render_template


def test_render_template_substitutes():
    assert render_template("user={{ user }}", {"user": "ana"}) == "user=ana"


def test_render_template_keeps_trailing_newline():
    assert render_template("x\n", {}) == "x\n"


def test_render_template_supports_blocks():
    text = "{% if dark %}theme=dark{% else %}theme=light{% endif %}\n"
    assert render_template(text, {"dark": True}) == "theme=dark\n"


def test_render_template_undefined_variable():
    """Undefined variables fail instead of rendering as empty strings."""
    with pytest.raises(RenderError) as exc_info:
        render_template("{{ nope }}", {})
    assert "nope" in exc_info.value.details


def test_render_template_syntax_error():
    with pytest.raises(RenderError):
        render_template("{% if %}", {})


@pytest.mark.parametrize("text,variables,cause", [
    ("{{ x + 1 }}", {"x": "s"}, TypeError),
    ("{{ 1 / n }}", {"n": 0}, ZeroDivisionError),
    ("{{ n | first }}", {"n": 5}, TypeError),
])
def test_render_template_runtime_errors(text, variables, cause):
    """Errors raised while evaluating expressions become RenderError with the cause chained."""
    with pytest.raises(RenderError) as exc_info:
        render_template(text, variables)
    assert isinstance(exc_info.value.__cause__, cause)
    assert cause.__name__ in exc_info.value.details


def test_render_template_variable_named_self():
    """Variables are passed as a mapping, so names that clash with render()'s signature still work."""
    assert render_template("{{ name }}", {"self": 1, "name": "x"}) == "x"
