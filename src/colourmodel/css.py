"""Cross-browser CSS3 gradient declarations.

Browser support reference: http://caniuse.com/css-gradients
"""

from colourmodel.models.color import Gradient


def format_css_gradient(
    base: str,
    gradient: Gradient,
    vintage_browsers: bool = False,
    suffix: str = "",
    prefix: str = "",
) -> str:
    """Build the CSS block for a top-to-bottom gradient.

    Args:
        base: Flat fallback colour, 6-digit HEX without '#'
        gradient: Light (top) and dark (bottom) colours
        vintage_browsers: Include -webkit-gradient, -moz- and -o- declarations
        suffix: Text appended to every line (e.g. "\\n")
        prefix: Text prepended to every line (e.g. indentation)

    Returns:
        The declarations concatenated in a fixed order
    """
    light, dark = gradient.light, gradient.dark

    lines = [
        # Fallback for browsers without gradient support
        f"background-color: #{base};",
        # IE
        f"filter: progid:DXImageTransform.Microsoft.gradient(startColorstr='#{light}', endColorstr='#{dark}');",
    ]

    # Safari 4+, Chrome 1-9
    if vintage_browsers:
        lines.append(
            f"background-image: -webkit-gradient(linear, 0% 0%, 0% 100%, from(#{light}), to(#{dark}));"
        )

    # Safari 5.1+, Mobile Safari, Chrome 10+
    lines.append(f"background-image: -webkit-linear-gradient(top, #{light}, #{dark});")

    if vintage_browsers:
        # Firefox 3.6+
        lines.append(f"background-image: -moz-linear-gradient(top, #{light}, #{dark});")
        # Opera 11.10+
        lines.append(f"background-image: -o-linear-gradient(top, #{light}, #{dark});")

    # Unprefixed: FF 16+, IE10+, Chrome 26+, Safari 7+, Opera 12.1+
    lines.append(f"background-image: linear-gradient(to bottom, #{light}, #{dark});")

    return "".join(f"{prefix}{line}{suffix}" for line in lines)
