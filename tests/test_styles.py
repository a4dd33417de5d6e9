"""Gradient and positioning style tests."""

import unittest

from slidemd.models.presentation import Background, Element, ElementStyle, Layer, Position
from slidemd.render.styles import build_css_gradient, build_position_style


class TestGradient(unittest.TestCase):
    def test_horizontal_flows_top_to_bottom(self) -> None:
        background = Background(
            orientation="horizontal",
            layers=[Layer(color="#FFF", proportion="30%"), Layer(color="#000", proportion="70%")],
        )
        self.assertEqual(
            build_css_gradient(background),
            "linear-gradient(to bottom, #FFF 0.0% 30.0%, #000 30.0% 100.0%)",
        )

    def test_vertical_flows_left_to_right(self) -> None:
        # Orientation names the band stacking; the axis is inverted on purpose.
        background = Background(
            orientation="vertical",
            layers=[Layer(color="red", proportion="50%"), Layer(color="blue", proportion="50%")],
        )
        self.assertEqual(
            build_css_gradient(background),
            "linear-gradient(to right, red 0.0% 50.0%, blue 50.0% 100.0%)",
        )

    def test_proportions_not_normalized(self) -> None:
        background = Background(
            layers=[Layer(color="red", proportion="60%"), Layer(color="blue", proportion="60%")],
        )
        self.assertEqual(
            build_css_gradient(background),
            "linear-gradient(to bottom, red 0.0% 60.0%, blue 60.0% 120.0%)",
        )

    def test_under_specified_leaves_gap(self) -> None:
        background = Background(layers=[Layer(color="red", proportion="25%")])
        self.assertEqual(build_css_gradient(background), "linear-gradient(to bottom, red 0.0% 25.0%)")

    def test_no_background(self) -> None:
        self.assertIsNone(build_css_gradient(None))
        self.assertIsNone(build_css_gradient(Background()))


class TestPositionStyle(unittest.TestCase):
    def test_text_with_overrides(self) -> None:
        element = Element(
            type="text",
            position=Position(x="10%", y="20%"),
            style=ElementStyle(color="#fff", alignment="center"),
        )
        self.assertEqual(
            build_position_style(element),
            "position: absolute; left: 10%; top: 20%; color: #fff; text-align: center;",
        )

    def test_style_ignored_for_media(self) -> None:
        element = Element(
            type="image",
            position=Position(x="50%", y="0%"),
            style=ElementStyle(color="#fff"),
        )
        self.assertEqual(build_position_style(element), "position: absolute; left: 50%; top: 0%;")

    def test_missing_position(self) -> None:
        self.assertEqual(build_position_style(Element(type="text")), "position: absolute;")


if __name__ == "__main__":
    unittest.main()
