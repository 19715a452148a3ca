"""Shared fixtures for core unit tests"""

import pytest

from tmpldiff.core.models import Added, Removed, TemplateDescription, Unchanged


@pytest.fixture(name="two_change_diff")
def two_change_diff_fixture():
    """A removal near the top and an addition at the end, three unchanged lines apart."""
    return [
        Unchanged("a", "a"),
        Removed("b"),
        Unchanged("c", "c"),
        Unchanged("d", "d"),
        Unchanged("e", "e"),
        Added("f"),
    ]


@pytest.fixture(name="make_template")
def make_template_fixture(tmp_path):
    """Write source/target files under tmp_path and return a TemplateDescription for them."""
    def _make(source_text: str, target_text: str | None, actions: list = None) -> TemplateDescription:
        source = tmp_path / "source.tmpl"
        target = tmp_path / "target.conf"
        source.write_text(source_text)
        if target_text is not None:
            target.write_text(target_text)
        return TemplateDescription(source=source, target=target, actions=actions or [])

    return _make
