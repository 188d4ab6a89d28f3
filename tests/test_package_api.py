"""Tests for the public package surface."""

from __future__ import annotations

import importlib

import pytest

import textescape
from textescape import escape, translate


class TestPackageExports:
    """Test what ``import textescape`` provides."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute."""
        for name in textescape.__all__:
            assert hasattr(textescape, name), name

    def test_version_string(self) -> None:
        """__version__ is a non-empty string."""
        assert isinstance(textescape.__version__, str)
        assert textescape.__version__

    @pytest.mark.parametrize(
        "module_name",
        [
            "textescape.booleans",
            "textescape.validate",
            "textescape.escape",
            "textescape.translate",
            "textescape.translate.entities",
            "textescape.diagnostics",
            "textescape.deprecation",
            "textescape.constants",
            "textescape.enums",
        ],
    )
    def test_submodules_import(self, module_name: str) -> None:
        """Documented submodules import and declare __all__."""
        module = importlib.import_module(module_name)
        assert module.__all__

    def test_translate_all_resolves(self) -> None:
        """Every translate export exists."""
        for name in translate.__all__:
            assert hasattr(translate, name), name

    def test_escape_functions_match_translators(self) -> None:
        """Top-level functions are the escape module's functions."""
        assert textescape.escape_java is escape.escape_java
        assert textescape.unescape_html4 is escape.unescape_html4


class TestPrebuiltTranslators:
    """Test the module-level translator chains."""

    @pytest.mark.parametrize("name", [n for n in escape.__all__ if n.isupper()])
    def test_are_translators(self, name: str) -> None:
        """Every pre-built chain is a Translator."""
        assert isinstance(getattr(escape, name), translate.Translator)

    def test_custom_flavour_from_builtin(self) -> None:
        """Pre-built chains extend with with_()."""
        custom = escape.ESCAPE_JAVA.with_(translate.LookupTranslator({"$": "\\$"}))
        assert custom.translate('$"x"') == '\\$\\"x\\"'

    def test_translate_to_writer(self) -> None:
        """Pre-built chains write into text streams."""
        import io  # noqa: PLC0415

        buffer = io.StringIO()
        escape.ESCAPE_HTML4.translate_to("<b>", buffer)
        assert buffer.getvalue() == "&lt;b&gt;"
