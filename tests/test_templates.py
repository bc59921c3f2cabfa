"""Unit tests for TemplateRenderer (contractkit.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from contractkit.templates import TemplateRenderer

pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_bundled_templates(self):
        assert TemplateRenderer().list_templates() == [
            "solidity/contract.sol.j2",
            "stylus/lib.rs.j2",
        ]

    def test_list_with_prefix(self):
        assert TemplateRenderer().list_templates("stylus") == ["stylus/lib.rs.j2"]
        assert TemplateRenderer().list_templates("missing") == []

    def test_filters(self, tmp_path: Path):
        (tmp_path / "case.j2").write_text(
            "{{ n | pascal_case }} {{ n | snake_case }} {{ n | camel_case }}", encoding="utf-8"
        )
        text = TemplateRenderer(tmp_path).render("case.j2", {"n": "initial_owner"})
        assert text == "InitialOwner initial_owner initialOwner"

    def test_no_html_escaping(self, tmp_path: Path):
        (tmp_path / "raw.j2").write_text("{{ s }}", encoding="utf-8")
        text = TemplateRenderer(tmp_path).render("raw.j2", {"s": 'a < b && "c"'})
        assert text == 'a < b && "c"'

    def test_strict_undefined(self, tmp_path: Path):
        (tmp_path / "strict.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("strict.j2", {})

    def test_custom_directory(self, tmp_path: Path):
        (tmp_path / "hello.j2").write_text("Hello {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "Vault"}) == "Hello Vault\n"
