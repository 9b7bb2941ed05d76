"""
# Span-Tokenizer: _version.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Version.
"""

__version__ = '1.0.0'
