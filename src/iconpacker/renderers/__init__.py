"""iconpacker renderers.

Renderers turn the generator's emission steps into target-language syntax.

Available Renderers:
- JavaRenderer: field + constructor + getters (``.java``)
- KotlinRenderer: primary-constructor property, plain vals (``.kt``)

Thread Safety:
Renderers are stateless; the SourceWriter is passed to every call.
Safe to share one instance between concurrent generation runs.

"""

from __future__ import annotations

from iconpacker.errors import ConfigError
from iconpacker.renderers.java import JavaRenderer
from iconpacker.renderers.kotlin import KotlinRenderer
from iconpacker.renderers.protocol import EnumRenderer, RendererCapabilities

# Closed set of target languages
RENDERERS: dict[str, type[EnumRenderer]] = {
    JavaRenderer.name: JavaRenderer,
    KotlinRenderer.name: KotlinRenderer,
}


def get_renderer(renderer: str | EnumRenderer) -> EnumRenderer:
    """Resolve a renderer by language name.

    Args:
        renderer: Language name ("java", "kotlin", case-insensitive) or an
            existing renderer instance, returned unchanged

    Raises:
        ConfigError: If the language is not supported

    Example:
        >>> get_renderer("kotlin").capabilities.file_extension
        '.kt'
    """
    if not isinstance(renderer, str):
        return renderer
    try:
        return RENDERERS[renderer.lower()]()
    except KeyError:
        supported = ", ".join(sorted(RENDERERS))
        raise ConfigError(
            f"unknown target language '{renderer}' (supported: {supported})", "renderer"
        ) from None


__all__ = [
    "RENDERERS",
    "EnumRenderer",
    "JavaRenderer",
    "KotlinRenderer",
    "RendererCapabilities",
    "get_renderer",
]
