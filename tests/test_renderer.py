"""Tests for the Java and Kotlin renderers."""

from __future__ import annotations

import io

import pytest

from iconpacker.config import PropertyDescriptor
from iconpacker.errors import ConfigError
from iconpacker.renderers import RENDERERS, JavaRenderer, KotlinRenderer, get_renderer
from iconpacker.writer import SourceWriter


def _render(call) -> str:
    buffer = io.StringIO()
    call(SourceWriter(buffer))
    return buffer.getvalue()


class TestRendererRegistry:
    """Closed set of renderers."""

    def test_registry_contents(self) -> None:
        assert RENDERERS == {"java": JavaRenderer, "kotlin": KotlinRenderer}

    def test_lookup_case_insensitive(self) -> None:
        assert isinstance(get_renderer("Kotlin"), KotlinRenderer)

    def test_instance_passes_through(self) -> None:
        renderer = JavaRenderer()
        assert get_renderer(renderer) is renderer

    def test_unknown_language(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            get_renderer("swift")
        assert "java" in str(exc_info.value)
        assert "kotlin" in str(exc_info.value)


class TestCapabilities:
    """Capability flags are fixed per language."""

    def test_java(self) -> None:
        caps = JavaRenderer.capabilities
        assert caps.file_extension == ".java"
        assert caps.supports_property_in_constructor is False
        assert caps.constructor_in_declaration is False
        assert caps.require_getters is True

    def test_kotlin(self) -> None:
        caps = KotlinRenderer.capabilities
        assert caps.file_extension == ".kt"
        assert caps.supports_property_in_constructor is True
        assert caps.constructor_in_declaration is True
        assert caps.require_getters is False

    def test_capabilities_frozen(self) -> None:
        with pytest.raises(AttributeError):
            JavaRenderer.capabilities.require_getters = False  # type: ignore[misc]

    def test_renderers_hold_no_state(self) -> None:
        with pytest.raises(AttributeError):
            JavaRenderer().cache = {}  # type: ignore[attr-defined]


class TestJavaRenderer:
    """Java syntax primitives."""

    renderer = JavaRenderer()

    def test_open_file(self) -> None:
        assert _render(lambda out: self.renderer.open_file(out, "com.example")) == (
            "package com.example;\n"
        )

    def test_imports(self) -> None:
        out = _render(lambda out: self.renderer.write_imports(out, ["a.B", "c.D"]))
        assert out == "import a.B;\nimport c.D;\n"

    def test_open_enum_with_interfaces(self) -> None:
        out = _render(
            lambda out: self.renderer.open_enum(
                out, "VaadinIcon", ["IconFactory", "Named"], PropertyDescriptor("iconName"), "T"
            )
        )
        assert out == (
            "/**\n"
            " * Generated on T\n"
            " */\n"
            "public enum VaadinIcon implements IconFactory, Named {\n"
        )

    def test_open_enum_without_interfaces(self) -> None:
        out = _render(
            lambda out: self.renderer.open_enum(
                out, "VaadinIcon", [], PropertyDescriptor("iconName"), "T"
            )
        )
        assert out.endswith("public enum VaadinIcon {\n")

    def test_constant_separator_and_terminator(self) -> None:
        assert _render(lambda out: self.renderer.write_constant(out, "ALARM", "alarm", False)) == (
            '    ALARM("alarm"),\n'
        )
        assert _render(lambda out: self.renderer.write_constant(out, "ALARM", "alarm", True)) == (
            '    ALARM("alarm");\n'
        )

    def test_constant_value_escaped(self) -> None:
        out = _render(lambda out: self.renderer.write_constant(out, "Q", 'say "hi"\\', True))
        assert out == '    Q("say \\"hi\\"\\\\");\n'

    def test_control_characters_escaped(self) -> None:
        out = _render(lambda out: self.renderer.write_constant(out, "A_B", "a\tb\n", False))
        assert out == '    A_B("a\\tb\\n"),\n'

    def test_property(self) -> None:
        out = _render(lambda out: self.renderer.write_property(out, "iconName", True, "String"))
        assert out == "    private final String iconName;\n"

    def test_constructor(self) -> None:
        out = _render(
            lambda out: self.renderer.write_constructor(
                out, "VaadinIcon", PropertyDescriptor("iconName")
            )
        )
        assert out == (
            "    VaadinIcon(String iconName) {\n"
            "        this.iconName = iconName;\n"
            "    }\n"
        )

    def test_getter_for_field(self) -> None:
        out = _render(lambda out: self.renderer.write_getter(out, "iconName", False, "String"))
        assert out == (
            "    public String getIconName() {\n"
            "        return this.iconName;\n"
            "    }\n"
        )

    def test_getter_with_fixed_value_and_override(self) -> None:
        out = _render(
            lambda out: self.renderer.write_getter(out, "iconSetName", True, "String", "vaadin")
        )
        assert out == (
            "    @Override\n"
            "    public String getIconSetName() {\n"
            '        return "vaadin";\n'
            "    }\n"
        )

    def test_create_method(self) -> None:
        def call(out: SourceWriter) -> None:
            self.renderer.open_method(out, "create", True, "Icon")
            self.renderer.write_create_body(out, "Icon", "vaadin", "iconName")
            self.renderer.close_method(out)

        assert _render(call) == (
            "    @Override\n"
            "    public Icon create() {\n"
            '        return new Icon("vaadin", this.iconName);\n'
            "    }\n"
        )

    def test_close_enum(self) -> None:
        assert _render(self.renderer.close_enum) == "}"


class TestKotlinRenderer:
    """Kotlin syntax primitives."""

    renderer = KotlinRenderer()

    def test_open_file(self) -> None:
        assert _render(lambda out: self.renderer.open_file(out, "com.example")) == (
            "package com.example\n"
        )

    def test_imports(self) -> None:
        out = _render(lambda out: self.renderer.write_imports(out, ["a.B"]))
        assert out == "import a.B\n"

    def test_open_enum_declares_property(self) -> None:
        out = _render(
            lambda out: self.renderer.open_enum(
                out, "VaadinIcon", ["IconFactory"], PropertyDescriptor("iconName", True), "T"
            )
        )
        assert out.endswith(
            "enum class VaadinIcon(override val iconName: String) : IconFactory {\n"
        )

    def test_open_enum_without_override_or_interfaces(self) -> None:
        out = _render(
            lambda out: self.renderer.open_enum(
                out, "VaadinIcon", [], PropertyDescriptor("iconName"), "T"
            )
        )
        assert out.endswith("enum class VaadinIcon(val iconName: String) {\n")

    def test_constant_terminator(self) -> None:
        assert _render(lambda out: self.renderer.write_constant(out, "ALARM", "alarm", True)) == (
            '    ALARM("alarm");\n'
        )

    def test_dollar_escaped(self) -> None:
        out = _render(lambda out: self.renderer.write_constant(out, "USD", "$usd", False))
        assert out == '    USD("\\$usd"),\n'

    def test_control_characters_escaped(self) -> None:
        out = _render(lambda out: self.renderer.write_constant(out, "A_B", "a\r\nb", True))
        assert out == '    A_B("a\\r\\nb");\n'

    def test_property_with_value(self) -> None:
        out = _render(
            lambda out: self.renderer.write_property(out, "iconSetName", True, "String", "vaadin")
        )
        assert out == '    override val iconSetName: String = "vaadin"\n'

    def test_getter_and_constructor_emit_nothing(self) -> None:
        assert _render(lambda out: self.renderer.write_getter(out, "iconName", True, "String")) == ""
        assert _render(
            lambda out: self.renderer.write_constructor(
                out, "VaadinIcon", PropertyDescriptor("iconName")
            )
        ) == ""

    def test_create_function(self) -> None:
        def call(out: SourceWriter) -> None:
            self.renderer.open_method(out, "create", True, "Icon")
            self.renderer.write_create_body(out, "Icon", "vaadin", "iconName")
            self.renderer.close_method(out)

        assert _render(call) == '    override fun create(): Icon = Icon("vaadin", this.iconName)\n'
