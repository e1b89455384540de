from typing import Protocol

from markdown_it import MarkdownIt
from rich.console import Console, ConsoleOptions, RenderResult
from rich.markdown import CodeBlock, Heading, Markdown, MarkdownContext
from rich.syntax import Syntax
from rich.text import Text


class MarkdownRenderer(Protocol):
    def render(self, text: str) -> str: ...


class CommonMarkRenderer:
    """Renders markdown to HTML with markdown-it-py.

    CommonMark plus the GitHub-flavored table and strikethrough syntax.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark").enable(["table", "strikethrough"])

    def render(self, text: str) -> str:
        return self._md.render(text)


class SlimHeading(Heading):
    def on_enter(self, context: MarkdownContext) -> None:
        # the heading level is indicated in the tag name, e.g. self.tag == 'h1'
        heading_level = int(self.tag[1:])
        context.enter_style(self.style_name)
        self.text = Text("#" * heading_level + " ", context.current_style)

    def __rich_console__(
        self,
        console: Console,
        options: ConsoleOptions,
    ) -> RenderResult:
        yield self.text


class NonWrappingCodeBlock(CodeBlock):
    def __rich_console__(
        self,
        console: Console,
        options: ConsoleOptions,
    ) -> RenderResult:
        render_options = options.update(no_wrap=True, overflow="ignore")

        code = str(self.text).rstrip()
        syntax = Syntax(code, self.lexer_name, theme=self.theme, word_wrap=False)
        return syntax.highlight(code).__rich_console__(console, render_options)


class PostStyledMarkdown(Markdown):
    """Terminal rendering of a post body, for reading posts from the CLI."""

    elements = dict(Markdown.elements)
    elements["fence"] = NonWrappingCodeBlock
    elements["code_block"] = NonWrappingCodeBlock
    elements["heading_open"] = SlimHeading

    def __rich_console__(
        self,
        console: Console,
        options: ConsoleOptions,
    ) -> RenderResult:
        # long prose lines should wrap even though code blocks don't
        render_options = options.update(no_wrap=False, overflow="fold")
        return super().__rich_console__(console, render_options)
