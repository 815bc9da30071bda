# tests/test_render.py
from __future__ import annotations

import pytest

from hostfan.executor.render import render


def test_replaces_every_occurrence() -> None:
    assert render("ssh {{host}} 'hostname; echo {{host}}'", "{{host}}", "web1") == (
        "ssh web1 'hostname; echo web1'"
    )


def test_missing_tag_returns_template_unchanged() -> None:
    for hostname in ["a", "b", "c"]:
        assert render("uptime", "{{host}}", hostname) == "uptime"


def test_hostname_containing_tag_is_not_expanded_again() -> None:
    assert render("echo HOST", "HOST", "HOSTHOST") == "echo HOSTHOST"


def test_no_escaping_is_applied() -> None:
    assert render("echo HOST", "HOST", "a; rm -rf /tmp/x") == "echo a; rm -rf /tmp/x"


@pytest.mark.parametrize(
    "template, tag, hostname",
    [
        ("", "", ""),
        ("abc", "", "x"),
        ("", "HOST", "a"),
        ("HOSTHOST", "HOST", ""),
    ],
)
def test_render_is_total_and_deterministic(template: str, tag: str, hostname: str) -> None:
    first = render(template, tag, hostname)
    assert isinstance(first, str)
    assert render(template, tag, hostname) == first


def test_empty_tag_inserts_hostname_between_characters() -> None:
    assert render("ab", "", "-") == "-a-b-"
