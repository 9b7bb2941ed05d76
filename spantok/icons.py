"""
# Span-Tokenizer: icons.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Built-in token definition for Bootstrap icon shortcodes.

A shortcode `@(«icon_name»)` is replaced by an inline icon element
whose class is «icon_name», e.g. `@(bi-patch-question-fill)`.
"""

from spantok.constants import BOOTSTRAP_END, BOOTSTRAP_ICON_TEMPLATE, BOOTSTRAP_KIND, BOOTSTRAP_START
from spantok.definitions import TokenDefinition


def build_bootstrap_icon_html(name: str) -> str:
    return BOOTSTRAP_ICON_TEMPLATE.format(name=name)


async def replace_bootstrap_token(content: str) -> str:
    return build_bootstrap_icon_html(content)


def build_bootstrap_token_definition() -> TokenDefinition:
    return TokenDefinition(
        kind=BOOTSTRAP_KIND,
        start=BOOTSTRAP_START,
        end=BOOTSTRAP_END,
        transform=replace_bootstrap_token,
    )
