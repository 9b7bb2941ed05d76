"""
# Span-Tokenizer: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core tokenization logic.

Text is scanned character by character through a window of the most recent characters,
the window being as long as the longest delimiter in use.
Whenever the window ends with the start delimiter of a token definition,
the text up to that point becomes a `text` token,
and the text following it is tokenized as a nested span until the definition's end delimiter,
yielding a typed token with its own children.

Tokens are combined back into a string by concatenation,
optionally after replacing the content of each top-level typed token
with the result of its definition's transform.
"""

import warnings
from typing import Optional

from spantok.constants import TEXT_KIND, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from spantok.definitions import DefinitionRegistry, TokenDefinition, apply_transform
from spantok.icons import build_bootstrap_token_definition
from spantok.tokens import Token
from spantok.utilities import slide_window, substring


class ScanFrame:
    """
    Scanning state of one span that is still open.

    The bottom frame of a scan has no definition and holds the top-level tokens.
    """
    definition: Optional['TokenDefinition']
    closing_delimiter: str
    tokens: list['Token']
    content_start_index: int
    span_start_index: int
    text_start_index: int
    window: str

    def __init__(self, definition: Optional['TokenDefinition'], closing_delimiter: str, tokens: list['Token'],
                 content_start_index: int, span_start_index: int):
        self.definition = definition
        self.closing_delimiter = closing_delimiter
        self.tokens = tokens
        self.content_start_index = content_start_index
        self.span_start_index = span_start_index
        self.text_start_index = content_start_index
        self.window = ''


class Tokenizer:
    """
    Object building lists of tokens from text and combining them back into text.

    ## `get_tokens`

    Returns the top-level tokens found in some text, each typed token holding its nested tokens as children.
    Of several definitions whose start delimiters match at the same position, the first-registered one wins.

    An unclosed span runs to the end of the text,
    but its content is cut as if the end delimiter occupied the last characters of the text,
    e.g. `x[[y` gives a token of empty content for the definition `[[`/`]]`.

    ## `replace_tokens` and `combine`

    Transforms are run on top-level tokens only, one at a time in token order.
    A transform receives the raw content of its token, nested delimiters included.
    A failing transform propagates its exception and leaves later tokens untouched.
    """
    _registry: 'DefinitionRegistry'
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False, bootstrap_enabled: bool = True):
        self._registry = DefinitionRegistry()
        self._verbose_mode_enabled = verbose_mode_enabled

        if bootstrap_enabled:
            self._registry.register(build_bootstrap_token_definition())

    @property
    def registry(self) -> 'DefinitionRegistry':
        return self._registry

    def register(self, definition: 'TokenDefinition', position: Optional[int] = None):
        self._registry.register(definition, position)

    def unregister(self, kind: str) -> 'TokenDefinition':
        return self._registry.unregister(kind)

    def window_size(self) -> int:
        return self._registry.window_size()

    def get_tokens(self, text: str) -> list['Token']:
        tokens: list['Token'] = []
        self.tokenize(text, 0, self.window_size(), '', tokens)

        return tokens

    def tokenize(self, text: str, start_index: int, window_size: int, closing_delimiter: str,
                 tokens: list['Token']) -> int:
        """
        Tokenize text from `start_index`, appending the tokens found to `tokens`.

        If `closing_delimiter` is non-empty, scanning stops once it is found,
        and the index of its last character is returned.
        Otherwise (or if it is never found) scanning runs to the end of the text,
        and the length of the text is returned.

        Spans are tracked on an explicit stack of scan frames, so nesting depth is not bounded by recursion.
        """
        definitions = self._registry.definitions
        frames = [ScanFrame(None, closing_delimiter, tokens, start_index, start_index)]
        index = start_index

        while True:
            frame = frames[-1]

            if index >= len(text):
                Tokenizer.append_text_token(text[frame.text_start_index:], frame.tokens)
                if len(frames) == 1:
                    return len(text)

                frames.pop()
                Tokenizer.close_frame(text, frame, frames[-1], len(text), closing_delimiter_found=False)
                index = len(text)
                continue

            frame.window = slide_window(frame.window, text[index], window_size)

            for definition in definitions:
                if frame.window.endswith(definition.start):
                    span_start_index = index - len(definition.start) + 1
                    Tokenizer.append_text_token(text[frame.text_start_index:span_start_index], frame.tokens)
                    frames.append(ScanFrame(definition, definition.end, [], index + 1, span_start_index))
                    break

                if frame.closing_delimiter != '' and frame.window.endswith(frame.closing_delimiter):
                    closing_start_index = index - len(frame.closing_delimiter) + 1
                    Tokenizer.append_text_token(text[frame.text_start_index:closing_start_index], frame.tokens)
                    if len(frames) == 1:
                        return index

                    frames.pop()
                    Tokenizer.close_frame(text, frame, frames[-1], index, closing_delimiter_found=True)
                    break

            index += 1

    @staticmethod
    def close_frame(text: str, frame: 'ScanFrame', parent_frame: 'ScanFrame', parsed_till: int,
                    closing_delimiter_found: bool):
        """
        Turn a finished scan frame into a typed token of its parent frame.

        The content is cut at `parsed_till - len(end) + 1` whether or not the end delimiter was found.
        """
        definition = frame.definition
        content = substring(text, frame.content_start_index, parsed_till - len(definition.end) + 1)

        if closing_delimiter_found:
            found_closing_delimiter = definition.end
        else:
            found_closing_delimiter = ''

        parent_frame.tokens.append(
            Token(
                definition.kind,
                content,
                frame.tokens,
                definition.start,
                found_closing_delimiter,
                source=text[frame.span_start_index:parsed_till + 1],
            )
        )
        parent_frame.text_start_index = parsed_till + 1
        parent_frame.window = ''

    @staticmethod
    def append_text_token(content: str, tokens: list['Token']):
        if len(content) > 0:
            tokens.append(Token(TEXT_KIND, content))

    async def replace_tokens(self, tokens: list['Token']) -> list['Token']:
        for token in tokens:
            if token.is_text:
                continue

            definition = self._registry.find_definition(token.kind)
            if definition is None:
                continue

            content_before = token.content
            token.content = await apply_transform(definition.transform, content_before)

            if self._verbose_mode_enabled:
                self.print_replacement(token.kind, content_before, token.content)

        return tokens

    @staticmethod
    def print_replacement(kind: str, content_before: str, content_after: str):
        if content_before == content_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        try:
            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{kind}')
            print(content_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(content_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{kind}')
            print('\n\n\n\n')
        except UnicodeEncodeError:
            warnings.warn(
                f'warning: verbose output for `#{kind}` cut short by a non-Unicode terminal encoding, '
                f'likely `cp1252` on Git BASH for Windows. '
                f'Try setting the `PYTHONIOENCODING` environment variable to `utf-8`. '
                f'See <https://stackoverflow.com/a/7865013>.'
            )

    async def combine(self, tokens: list['Token'], apply_transforms: bool) -> str:
        if apply_transforms:
            await self.replace_tokens(tokens)

        return ''.join(token.assemble() for token in tokens)

    async def parse(self, text: str) -> str:
        """
        Tokenize some text and combine it back with every transform applied.
        """
        tokens = self.get_tokens(text)

        return await self.combine(tokens, apply_transforms=True)
