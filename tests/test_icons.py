"""
# Span-Tokenizer: test_icons.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `icons.py`.
"""

import unittest

from spantok.icons import build_bootstrap_icon_html, build_bootstrap_token_definition, replace_bootstrap_token


class TestIcons(unittest.IsolatedAsyncioTestCase):
    def test_build_bootstrap_icon_html(self):
        self.assertEqual(
            build_bootstrap_icon_html('bi-star'),
            '<i class="sidebar-icon"><i id="sidebar-icon" class="bi-star"></i></i>',
        )
        self.assertEqual(
            build_bootstrap_icon_html(''),
            '<i class="sidebar-icon"><i id="sidebar-icon" class=""></i></i>',
        )

    def test_build_bootstrap_token_definition(self):
        definition = build_bootstrap_token_definition()

        self.assertEqual(definition.kind, 'bootstrap')
        self.assertEqual(definition.start, '@(')
        self.assertEqual(definition.end, ')')
        self.assertIs(definition.transform, replace_bootstrap_token)

    async def test_replace_bootstrap_token(self):
        self.assertEqual(
            await replace_bootstrap_token('bi-patch-question-fill'),
            '<i class="sidebar-icon"><i id="sidebar-icon" class="bi-patch-question-fill"></i></i>',
        )


if __name__ == '__main__':
    unittest.main()
