"""
# Span-Tokenizer: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Delimiter-based span tokenizer with asynchronous content transforms.
"""
