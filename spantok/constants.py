"""
# Span-Tokenizer: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

TEXT_KIND = 'text'

BOOTSTRAP_KIND = 'bootstrap'
BOOTSTRAP_START = '@('
BOOTSTRAP_END = ')'
BOOTSTRAP_ICON_TEMPLATE = '<i class="sidebar-icon"><i id="sidebar-icon" class="{name}"></i></i>'
