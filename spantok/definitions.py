"""
# Span-Tokenizer: definitions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Token definitions and the registry holding them.
"""

import functools
import inspect
import warnings
from typing import Awaitable, Callable, Iterator, NamedTuple, Optional, Union

from spantok.exceptions import UnrecognisedKindException
from spantok.utilities import compute_longest_length

Transform = Callable[[str], Union[str, Awaitable[str]]]


class TokenDefinition(NamedTuple):
    kind: str
    start: str
    end: str
    transform: Transform


async def apply_transform(transform: Transform, content: str) -> str:
    """
    Call a transform on some content, awaiting the result if the transform is asynchronous.
    """
    result = transform(content)
    if inspect.isawaitable(result):
        result = await result

    return result


def fallback_to_content(transform: Callable, exception_types: tuple[type[BaseException], ...] = ()) -> Transform:
    """
    Wrap a transform so that the original content is kept when no replacement is available.

    The wrapped transform returns the original content if `transform` returns None,
    or if it raises an instance of one of `exception_types`.
    Any other exception propagates.
    """
    @functools.wraps(transform)
    async def transform_or_keep_content(content: str) -> str:
        try:
            result = await apply_transform(transform, content)
        except exception_types:
            return content

        if result is None:
            return content

        return result

    return transform_or_keep_content


class DefinitionRegistry:
    """
    Ordered collection of token definitions.

    Order is significant: when several definitions could start a token at the same position,
    the first-registered one wins, and lookups by kind return the first-registered match.
    Neither delimiters nor kinds are validated.
    An empty delimiter matches at every position, which yields a token boundary at every character;
    such a definition is registered all the same, with a warning.
    """
    _definitions: list['TokenDefinition']

    def __init__(self):
        self._definitions = []

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator['TokenDefinition']:
        return iter(self._definitions)

    @property
    def definitions(self) -> tuple['TokenDefinition', ...]:
        return tuple(self._definitions)

    @property
    def kinds(self) -> list[str]:
        return [definition.kind for definition in self._definitions]

    def register(self, definition: 'TokenDefinition', position: Optional[int] = None):
        if definition.start == '' or definition.end == '':
            warnings.warn(
                f'warning: token definition `{definition.kind}` has an empty delimiter; '
                f'an empty delimiter matches at every character'
            )

        if position is None:
            self._definitions.append(definition)
        else:
            self._definitions.insert(position, definition)

    def unregister(self, kind: str) -> 'TokenDefinition':
        definition = self.load_definition(kind)
        self._definitions.remove(definition)

        return definition

    def find_definition(self, kind: str) -> Optional['TokenDefinition']:
        for definition in self._definitions:
            if definition.kind == kind:
                return definition

        return None

    def load_definition(self, kind: str) -> 'TokenDefinition':
        definition = self.find_definition(kind)
        if definition is None:
            raise UnrecognisedKindException(kind)

        return definition

    def window_size(self) -> int:
        """
        Compute the longest delimiter length, being the number of trailing characters to keep while scanning.
        """
        return compute_longest_length(
            delimiter
            for definition in self._definitions
            for delimiter in (definition.start, definition.end)
        )
