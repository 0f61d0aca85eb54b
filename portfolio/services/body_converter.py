import re

import markdown
from markdown.treeprocessors import Treeprocessor

from portfolio.exceptions import ConversionError

# GitHub-flavoured behaviour on top of Python-Markdown
MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "toc",
    "nl2br",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

MARKDOWN_EXTENSION_CONFIGS = {
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
}

_UNSAFE_URL = re.compile(r"^\s*(javascript|vbscript|file|data):", re.IGNORECASE)


class UnsafeUrlTreeprocessor(Treeprocessor):
    """Blank out link and image URLs with script-capable schemes."""

    def run(self, root):
        for el in root.iter():
            for attr in ("href", "src"):
                if _UNSAFE_URL.match(el.get(attr, "")):
                    el.set(attr, "")


def convert_body(text: str) -> str:
    """
    Render a markdown post body to XHTML.

    Raw HTML in the source is escaped rather than passed through, and
    javascript:-style URLs are emptied, so the output can be embedded into
    templates unescaped.
    """
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        output_format="xhtml",
    )
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    md.treeprocessors.register(UnsafeUrlTreeprocessor(md), "unsafe_url", 0)
    try:
        return md.convert(text)
    except Exception as e:
        raise ConversionError(f"error converting markdown: {e}") from e
