"""
# Span-Tokenizer: tokens.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tokens produced by the tokenizer.
"""

from typing import Iterator, Optional

from spantok.constants import TEXT_KIND


class Token:
    """
    A parsed span of text.

    A token is either untyped (kind `text`), holding a literal substring of the source,
    or typed (kind of the matching token definition), holding the raw substring strictly between
    its opening and closing delimiters. Typed tokens also carry `children`,
    the tokens found by parsing that substring;
    they are never consulted when tokens are combined.

    A typed token also keeps `source`, the whole span as it appears in the text, delimiters included.
    For a span that is never closed, `source` runs to the end of the text,
    even where `content` has been cut short.

    Assigning to `content` marks the token as replaced.
    A replaced token contributes only its content to a combined string,
    whereas an unreplaced typed token contributes its source.
    """
    _kind: str
    _content: str
    _children: list['Token']
    _opening_delimiter: str
    _closing_delimiter: str
    _source: str
    _is_replaced: bool

    def __init__(self, kind: str, content: str, children: Optional[list['Token']] = None,
                 opening_delimiter: str = '', closing_delimiter: str = '', source: Optional[str] = None):
        self._kind = kind
        self._content = content
        self._children = children if children is not None else []
        self._opening_delimiter = opening_delimiter
        self._closing_delimiter = closing_delimiter
        if source is None:
            source = f'{opening_delimiter}{content}{closing_delimiter}'
        self._source = source
        self._is_replaced = False

    def __repr__(self) -> str:
        return f'Token(kind={self._kind!r}, content={self._content!r}, children={self._children!r})'

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str):
        self._content = value
        self._is_replaced = True

    @property
    def children(self) -> list['Token']:
        return self._children

    @property
    def opening_delimiter(self) -> str:
        return self._opening_delimiter

    @property
    def closing_delimiter(self) -> str:
        """
        The closing delimiter as found in the source, or the empty string if the span was never closed.
        """
        return self._closing_delimiter

    @property
    def source(self) -> str:
        return self._source

    @property
    def is_replaced(self) -> bool:
        return self._is_replaced

    @property
    def is_text(self) -> bool:
        return self._kind == TEXT_KIND

    def assemble(self) -> str:
        if self._is_replaced or self.is_text:
            return self._content

        return self._source

    def walk(self) -> Iterator['Token']:
        """
        Iterate over this token and all of its descendants, depth-first and in source order.
        """
        pending_tokens = [self]
        while len(pending_tokens) > 0:
            token = pending_tokens.pop()
            yield token
            pending_tokens.extend(reversed(token.children))
