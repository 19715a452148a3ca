"""Template rendering: thin Jinja2 wrapper that fails fast on missing variables"""

from typing import Any, Mapping

from jinja2 import Environment, StrictUndefined, TemplateError

from tmpldiff.core.errors import RenderError


env = Environment(
    autoescape=False,               # dotfiles, not HTML
    keep_trailing_newline=True,     # rendered output is compared line by line with the target
    undefined=StrictUndefined,
)


def render_template(text: str, variables: Mapping[str, Any]) -> str:
    """Render template text with the given variable bindings.

    Raises:
        RenderError: on template syntax errors, undefined variables, or errors raised while
            evaluating expressions and filters.
    """
    try:
        template = env.from_string(text)
    except TemplateError as e:
        raise RenderError("Failed to render template", str(e)) from e
    # runtime failures inside expressions and filters surface as plain exceptions
    try:
        return template.render(variables)
    except TemplateError as e:
        raise RenderError("Failed to render template", str(e)) from e
    except Exception as e:
        raise RenderError("Failed to render template", f"{type(e).__name__}: {e}") from e
