"""Tests for ColourModel state, channel setters and derived colours."""

import pytest

from colourmodel import (
    ColourModel,
    Gradient,
    InvalidArgumentError,
    InvalidFormatError,
    hex_to_hsl,
    rgb_to_hex,
)
from colourmodel.models import Channel


class TestConstruction:
    """Test building a ColourModel from HEX."""

    @pytest.mark.unit
    def test_normalises_input(self):
        colour = ColourModel("#ABC")
        assert colour.get_hex() == "aabbcc"

    @pytest.mark.unit
    def test_keyword_argument(self):
        assert ColourModel(colour="#336699").get_hex() == "336699"

    @pytest.mark.unit
    def test_caches_rgb_and_hsl(self, steel_blue):
        assert steel_blue.get_rgb().to_rgb_tuple() == (51, 102, 153)
        assert steel_blue.get_hsl().h == pytest.approx(210)
        assert steel_blue.get_hsl().s == pytest.approx(0.5)
        assert steel_blue.get_hsl().l == pytest.approx(0.4)

    @pytest.mark.unit
    def test_str_and_repr(self, steel_blue):
        assert str(steel_blue) == "#336699"
        assert repr(steel_blue) == "ColourModel('#336699')"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "#12", "1234", "abcdefg", "xyz"])
    def test_invalid_hex(self, value):
        with pytest.raises(InvalidFormatError):
            ColourModel(value)


class TestChannels:
    """Test channel getters and setters."""

    @pytest.mark.unit
    def test_get_channel_by_alias(self, steel_blue):
        assert steel_blue.get_channel("r") == 51
        assert steel_blue.get_channel("GREEN") == 102
        assert steel_blue.get_channel(Channel.BLUE) == 153
        assert steel_blue.get_channel("light") == pytest.approx(0.4)

    @pytest.mark.unit
    def test_properties_read_channels(self, steel_blue):
        assert steel_blue.red == 51
        assert steel_blue.hue == pytest.approx(210)
        assert steel_blue.saturation == pytest.approx(0.5)

    @pytest.mark.unit
    def test_rgb_setter_cascades_to_hex_and_hsl(self, steel_blue):
        steel_blue.red = 255

        assert steel_blue.get_hex() == "ff6699"
        assert steel_blue.get_rgb().to_rgb_tuple() == (255, 102, 153)
        assert steel_blue.get_hsl() == hex_to_hsl("ff6699")

    @pytest.mark.unit
    def test_hsl_setter_cascades_to_hex_and_rgb(self, steel_blue):
        steel_blue.hue = 0

        assert str(steel_blue) == "#993333"
        assert steel_blue.get_rgb().to_rgb_tuple() == (153, 51, 51)

    @pytest.mark.unit
    def test_hsl_setter_keeps_raw_value(self, steel_blue):
        """The HSL side holds the value that was set, not one re-derived from HEX."""
        steel_blue.hue = 0
        assert steel_blue.get_hsl().h == 0
        assert steel_blue.get_hsl().s == pytest.approx(0.5)

    @pytest.mark.unit
    def test_desaturate(self, steel_blue):
        steel_blue.saturation = 0
        assert steel_blue.get_hex() == "666666"

    @pytest.mark.unit
    def test_set_channel_by_name(self, steel_blue):
        steel_blue.set_channel("l", 1)
        assert steel_blue.get_hex() == "ffffff"

        steel_blue.set_channel("b", 0)
        assert steel_blue.get_hex() == "ffff00"

    @pytest.mark.unit
    def test_representations_stay_consistent(self, steel_blue):
        steel_blue.green = 200
        steel_blue.lightness = 0.3
        steel_blue.blue = 10

        assert rgb_to_hex(steel_blue.get_rgb()) == steel_blue.get_hex()
        assert steel_blue.get_hsl() == hex_to_hsl(steel_blue.get_hex())

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "channel, value",
        [("red", 256), ("green", -1), ("hue", 361), ("saturation", 1.5), ("lightness", -0.1)],
    )
    def test_out_of_range_leaves_colour_unchanged(self, steel_blue, channel, value):
        with pytest.raises(InvalidArgumentError):
            steel_blue.set_channel(channel, value)

        assert steel_blue.get_hex() == "336699"
        assert steel_blue.get_rgb().to_rgb_tuple() == (51, 102, 153)

    @pytest.mark.unit
    def test_unknown_channel(self, steel_blue):
        with pytest.raises(InvalidArgumentError) as exc_info:
            steel_blue.set_channel("alpha", 1)
        assert exc_info.value.kind == "channel"


class TestDarkenLighten:
    """Test darken and lighten."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "hex_value, darker, lighter",
        [
            ("336699", "264d73", "4080bf"),
            ("913399", "6d2673", "b540bf"),
        ],
    )
    def test_default_amount(self, hex_value, darker, lighter):
        colour = ColourModel(hex_value)
        assert colour.darken() == darker
        assert colour.lighten() == lighter

    @pytest.mark.unit
    def test_halfway(self, steel_blue):
        """None moves halfway to black or white."""
        assert steel_blue.darken(None) == "1a334d"
        assert steel_blue.lighten(None) == "8cb3d9"

    @pytest.mark.unit
    def test_zero_amount_is_identity(self, steel_blue):
        assert steel_blue.darken(0) == "336699"
        assert steel_blue.lighten(0) == "336699"

    @pytest.mark.unit
    def test_amount_clamps_at_black_and_white(self, steel_blue):
        assert steel_blue.darken(100) == "000000"
        assert steel_blue.lighten(100) == "ffffff"
        assert steel_blue.darken(250) == "000000"

    @pytest.mark.unit
    def test_does_not_modify_instance(self, steel_blue):
        steel_blue.darken()
        steel_blue.lighten(None)
        assert steel_blue.get_hex() == "336699"


class TestMix:
    """Test mixing two colours."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "first, second, expected",
        [
            ("ffffff", "ff0000", "ff7f7f"),
            ("00ff00", "ff0000", "7f7f00"),
            ("000000", "ff0000", "7f0000"),
            ("002fff", "000000", "00177f"),
            ("00ffed", "000000", "007f76"),
            ("ff9a00", "000000", "7f4d00"),
            ("ff9a00", "ffffff", "ffcc7f"),
            ("00ff2d", "ffffff", "7fff96"),
            ("8D43B4", "35CF64", "61898c"),
        ],
    )
    def test_equal_mix(self, first, second, expected):
        assert ColourModel(first).mix(second) == expected
        assert ColourModel(second).mix(first) == expected

    @pytest.mark.unit
    def test_full_bias(self):
        colour = ColourModel("336699")
        assert colour.mix("ffffff", 100) == "336699"
        assert colour.mix("ffffff", -100) == "ffffff"

    @pytest.mark.unit
    @pytest.mark.parametrize("amount", [-100.5, 101, 250])
    def test_amount_out_of_range(self, steel_blue, amount):
        with pytest.raises(InvalidArgumentError):
            steel_blue.mix("ffffff", amount)

    @pytest.mark.unit
    def test_invalid_other_colour(self, steel_blue):
        with pytest.raises(InvalidFormatError):
            steel_blue.mix("#12")


class TestComplementary:
    """Test complementary colours."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "colour, complement",
        [
            ("ff0000", "00ffff"),
            ("0000ff", "ffff00"),
            ("00ff00", "ff00ff"),
            ("ffff00", "0000ff"),
            ("00ffff", "ff0000"),
            ("49cbaf", "cb4965"),
            ("003eb2", "b27400"),
            ("b27400", "003eb2"),
            ("ffff99", "9999ff"),
            ("ccff00", "3300ff"),
            ("3300ff", "ccff00"),
            ("fb4a2c", "2cddfb"),
            ("9cebff", "ffb09c"),
        ],
    )
    def test_vectors(self, colour, complement):
        assert ColourModel(colour).complementary() == complement

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["336699", "913399", "49cbaf", "00ffff"])
    def test_complement_twice_is_identity(self, value):
        once = ColourModel(value).complementary()
        assert ColourModel(once).complementary() == value

    @pytest.mark.unit
    def test_grey_is_its_own_complement(self):
        assert ColourModel("4b4b4b").complementary() == "4b4b4b"


class TestClassification:
    """Test light/dark classification by luma."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "hex_value, dark",
        [
            ("000000", True),
            ("336699", True),
            ("913399", True),
            ("E5C3E8", False),
            ("D7E8DD", False),
            ("218A47", True),
            ("3D41CA", True),
            ("E5CCDD", False),
            ("FFFFFF", False),
        ],
    )
    def test_is_dark(self, hex_value, dark):
        assert ColourModel(hex_value).is_dark() is dark

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "hex_value, light",
        [("FFFFFF", True), ("A3FFE5", True), ("000000", False)],
    )
    def test_is_light(self, hex_value, light):
        assert ColourModel(hex_value).is_light() is light

    @pytest.mark.unit
    def test_other_colour_argument(self, steel_blue):
        assert steel_blue.is_light("ffffff") is True
        assert steel_blue.is_dark("ffffff") is False

    @pytest.mark.unit
    @pytest.mark.parametrize("hex_value", ["000000", "808080", "336699", "A3FFE5", "ffffff"])
    @pytest.mark.parametrize("threshold", [0, 100, 130, 255])
    def test_light_and_dark_are_exclusive(self, hex_value, threshold):
        colour = ColourModel(hex_value)
        assert colour.is_light(threshold=threshold) != colour.is_dark(threshold=threshold)

    @pytest.mark.unit
    def test_thresholds_are_independent(self):
        """With different thresholds a colour can be both light and dark."""
        grey = ColourModel("808080")
        assert grey.is_light(threshold=100) is True
        assert grey.is_dark(threshold=200) is True


class TestGradient:
    """Test gradient shade pairs."""

    @pytest.mark.unit
    def test_dark_colour_is_lightened(self, steel_blue):
        assert steel_blue.make_gradient() == Gradient(light="4080bf", dark="336699")

    @pytest.mark.unit
    def test_light_colour_is_darkened(self, white):
        assert white.make_gradient() == Gradient(light="ffffff", dark="e6e6e6")

    @pytest.mark.unit
    def test_halfway_gradient(self, steel_blue):
        assert steel_blue.make_gradient(None) == Gradient(light="8cb3d9", dark="336699")

    @pytest.mark.unit
    def test_css_gradient_uses_shades(self, steel_blue):
        css = steel_blue.get_css_gradient()
        assert css.startswith("background-color: #336699;")
        assert "startColorstr='#4080bf', endColorstr='#336699'" in css
