"""Collaborator protocols for rendering a tokenized section.

Each token kind goes to a different collaborator:

- Chunk -> ``ProseRenderer`` (a full Markdown renderer)
- Heading -> ``HeadingRenderer``
- Directive -> ``DirectiveResolver`` (looks the target up in the story tree
  and embeds the story, or renders a placeholder explaining what is wrong)

storymark ships ``HtmlHeadingRenderer`` as the reference heading renderer.
Markdown rendering and story resolution belong to the host application.

Example:
    class Resolver:
        def resolve_directive(self, target: str | None, controls: bool) -> str:
            if target is None:
                return "> Attribute `of` was not found in the `<Story />` tag."
            return embed(target, controls)

"""

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class ProseRenderer(Protocol[T_co]):
    """Renders a Markdown chunk verbatim."""

    def render_prose(self, text: str) -> T_co:
        """Render Markdown text.

        Args:
            text: Chunk text, exactly as it appears in the source.

        """
        ...


class HeadingRenderer(Protocol[T_co]):
    """Renders a heading element."""

    def render_heading(self, level: int, text: str) -> T_co:
        """Render a heading.

        Args:
            level: Number of ``#`` characters (may exceed 6).
            text: Heading text, including the space after the marker.

        """
        ...


class DirectiveResolver(Protocol[T_co]):
    """Resolves a ``<Story />`` directive to embedded content."""

    def resolve_directive(self, target: str | None, controls: bool) -> T_co:
        """Resolve a directive.

        Args:
            target: Value of the ``of`` attribute, None when the tag has none.
            controls: Whether the controls panel was requested.

        """
        ...
