"""
# Span-Tokenizer: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class UnrecognisedKindException(Exception):
    _kind: str

    def __init__(self, kind: str):
        super().__init__(f'error: no token definition of kind `{kind}`')
        self._kind = kind

    @property
    def kind(self) -> str:
        return self._kind
