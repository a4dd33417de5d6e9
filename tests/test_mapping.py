"""Template resolution and greedy mapping tests."""

import unittest

from slidemd.models.presentation import Element, Slide, Template
from slidemd.render.mapping import map_content, resolve_template


class TestResolveTemplate(unittest.TestCase):
    def setUp(self) -> None:
        self.templates = [Template(template_id="a"), Template(template_id="b")]

    def test_explicit_reference(self) -> None:
        self.assertEqual(resolve_template(Slide(template_id="b"), self.templates).template_id, "b")

    def test_default_is_first_declared(self) -> None:
        self.assertEqual(resolve_template(Slide(), self.templates).template_id, "a")

    def test_dangling_reference(self) -> None:
        self.assertIsNone(resolve_template(Slide(template_id="zzz"), self.templates))

    def test_no_templates(self) -> None:
        self.assertIsNone(resolve_template(Slide(), []))


class TestMapContent(unittest.TestCase):
    def _elements(self, *types):
        return [Element(type=t) for t in types]

    def test_one_to_one(self) -> None:
        elements = self._elements("text", "image")
        pairs = map_content(elements, ["A", "B"])
        self.assertEqual([block for _, block in pairs], ["A", "B"])
        self.assertIs(pairs[1][0], elements[1])

    def test_overflow_lands_in_last_slot(self) -> None:
        elements = self._elements("text", "text", "text")
        blocks = ["b1", "b2", "b3", "b4", "b5"]
        pairs = map_content(elements, blocks)
        self.assertEqual(len(pairs), 3)
        self.assertEqual(pairs[0][1], "b1")
        self.assertEqual(pairs[1][1], "b2")
        self.assertEqual(pairs[2][1], "b3\n\nb4\n\nb5")

    def test_overflow_ignores_last_slot_type(self) -> None:
        elements = self._elements("text", "image")
        pairs = map_content(elements, ["intro", "![a](a.png)", "more text"])
        self.assertEqual(pairs[1][0].type, "image")
        self.assertEqual(pairs[1][1], "![a](a.png)\n\nmore text")

    def test_single_element_takes_everything(self) -> None:
        pairs = map_content(self._elements("text"), ["x", "y"])
        self.assertEqual(pairs[0][1], "x\n\ny")

    def test_no_elements(self) -> None:
        self.assertEqual(map_content([], ["ignored"]), [])
        self.assertEqual(map_content([], []), [])

    def test_positional_not_content_driven(self) -> None:
        elements = self._elements("image", "text")
        pairs = map_content(elements, ["plain words", "![pic](pic.png)"])
        self.assertEqual(pairs[0][1], "plain words")


if __name__ == "__main__":
    unittest.main()
