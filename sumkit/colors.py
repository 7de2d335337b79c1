"""Named colours as RGBA vectors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .vector import Vector4

Color = Vector4

_TABLE = {
    "AliceBlue": (0.941176534, 0.972549081, 1.000000000, 1.000000000),
    "AntiqueWhite": (0.980392218, 0.921568692, 0.843137324, 1.000000000),
    "Aqua": (0.000000000, 1.000000000, 1.000000000, 1.000000000),
    "Aquamarine": (0.498039246, 1.000000000, 0.831372619, 1.000000000),
    "Azure": (0.941176534, 1.000000000, 1.000000000, 1.000000000),
    "Beige": (0.960784376, 0.960784376, 0.862745166, 1.000000000),
    "Bisque": (1.000000000, 0.894117713, 0.768627524, 1.000000000),
    "Black": (0.000000000, 0.000000000, 0.000000000, 1.000000000),
    "BlanchedAlmond": (1.000000000, 0.921568692, 0.803921640, 1.000000000),
    "Blue": (0.000000000, 0.000000000, 1.000000000, 1.000000000),
    "BlueViolet": (0.541176498, 0.168627456, 0.886274576, 1.000000000),
    "Brown": (0.647058845, 0.164705887, 0.164705887, 1.000000000),
    "BurlyWood": (0.870588303, 0.721568644, 0.529411793, 1.000000000),
    "CadetBlue": (0.372549027, 0.619607866, 0.627451003, 1.000000000),
    "Chartreuse": (0.498039246, 1.000000000, 0.000000000, 1.000000000),
    "Chocolate": (0.823529482, 0.411764741, 0.117647067, 1.000000000),
    "Coral": (1.000000000, 0.498039246, 0.313725501, 1.000000000),
    "CornflowerBlue": (0.392156899, 0.584313750, 0.929411829, 1.000000000),
    "Cornsilk": (1.000000000, 0.972549081, 0.862745166, 1.000000000),
    "Crimson": (0.862745166, 0.078431375, 0.235294133, 1.000000000),
    "Cyan": (0.000000000, 1.000000000, 1.000000000, 1.000000000),
    "DarkBlue": (0.000000000, 0.000000000, 0.545098066, 1.000000000),
    "DarkCyan": (0.000000000, 0.545098066, 0.545098066, 1.000000000),
    "DarkGoldenrod": (0.721568644, 0.525490224, 0.043137256, 1.000000000),
    "DarkGray": (0.662745118, 0.662745118, 0.662745118, 1.000000000),
    "DarkGreen": (0.000000000, 0.392156899, 0.000000000, 1.000000000),
    "DarkKhaki": (0.741176486, 0.717647076, 0.419607878, 1.000000000),
    "DarkMagenta": (0.545098066, 0.000000000, 0.545098066, 1.000000000),
    "DarkOliveGreen": (0.333333343, 0.419607878, 0.184313729, 1.000000000),
    "DarkOrange": (1.000000000, 0.549019635, 0.000000000, 1.000000000),
    "DarkOrchid": (0.600000024, 0.196078449, 0.800000072, 1.000000000),
    "DarkRed": (0.545098066, 0.000000000, 0.000000000, 1.000000000),
    "DarkSalmon": (0.913725555, 0.588235319, 0.478431404, 1.000000000),
    "DarkSeaGreen": (0.560784340, 0.737254918, 0.545098066, 1.000000000),
    "DarkSlateBlue": (0.282352954, 0.239215702, 0.545098066, 1.000000000),
    "DarkSlateGray": (0.184313729, 0.309803933, 0.309803933, 1.000000000),
    "DarkTurquoise": (0.000000000, 0.807843208, 0.819607913, 1.000000000),
    "DarkViolet": (0.580392182, 0.000000000, 0.827451050, 1.000000000),
    "DeepPink": (1.000000000, 0.078431375, 0.576470613, 1.000000000),
    "DeepSkyBlue": (0.000000000, 0.749019623, 1.000000000, 1.000000000),
    "DimGray": (0.411764741, 0.411764741, 0.411764741, 1.000000000),
    "DodgerBlue": (0.117647067, 0.564705908, 1.000000000, 1.000000000),
    "Firebrick": (0.698039234, 0.133333340, 0.133333340, 1.000000000),
    "FloralWhite": (1.000000000, 0.980392218, 0.941176534, 1.000000000),
    "ForestGreen": (0.133333340, 0.545098066, 0.133333340, 1.000000000),
    "Fuchsia": (1.000000000, 0.000000000, 1.000000000, 1.000000000),
    "Gainsboro": (0.862745166, 0.862745166, 0.862745166, 1.000000000),
    "GhostWhite": (0.972549081, 0.972549081, 1.000000000, 1.000000000),
    "Gold": (1.000000000, 0.843137324, 0.000000000, 1.000000000),
    "Goldenrod": (0.854902029, 0.647058845, 0.125490203, 1.000000000),
    "Gray": (0.501960814, 0.501960814, 0.501960814, 1.000000000),
    "Green": (0.000000000, 0.501960814, 0.000000000, 1.000000000),
    "GreenYellow": (0.678431392, 1.000000000, 0.184313729, 1.000000000),
    "Honeydew": (0.941176534, 1.000000000, 0.941176534, 1.000000000),
    "HotPink": (1.000000000, 0.411764741, 0.705882370, 1.000000000),
    "IndianRed": (0.803921640, 0.360784322, 0.360784322, 1.000000000),
    "Indigo": (0.294117659, 0.000000000, 0.509803951, 1.000000000),
    "Ivory": (1.000000000, 1.000000000, 0.941176534, 1.000000000),
    "Khaki": (0.941176534, 0.901960850, 0.549019635, 1.000000000),
    "Lavender": (0.901960850, 0.901960850, 0.980392218, 1.000000000),
    "LavenderBlush": (1.000000000, 0.941176534, 0.960784376, 1.000000000),
    "LawnGreen": (0.486274540, 0.988235354, 0.000000000, 1.000000000),
    "LemonChiffon": (1.000000000, 0.980392218, 0.803921640, 1.000000000),
    "LightBlue": (0.678431392, 0.847058892, 0.901960850, 1.000000000),
    "LightCoral": (0.941176534, 0.501960814, 0.501960814, 1.000000000),
    "LightCyan": (0.878431439, 1.000000000, 1.000000000, 1.000000000),
    "LightGoldenrodYellow": (0.980392218, 0.980392218, 0.823529482, 1.000000000),
    "LightGreen": (0.564705908, 0.933333397, 0.564705908, 1.000000000),
    "LightGray": (0.827451050, 0.827451050, 0.827451050, 1.000000000),
    "LightPink": (1.000000000, 0.713725507, 0.756862819, 1.000000000),
    "LightSalmon": (1.000000000, 0.627451003, 0.478431404, 1.000000000),
    "LightSeaGreen": (0.125490203, 0.698039234, 0.666666687, 1.000000000),
    "LightSkyBlue": (0.529411793, 0.807843208, 0.980392218, 1.000000000),
    "LightSlateGray": (0.466666698, 0.533333361, 0.600000024, 1.000000000),
    "LightSteelBlue": (0.690196097, 0.768627524, 0.870588303, 1.000000000),
    "LightYellow": (1.000000000, 1.000000000, 0.878431439, 1.000000000),
    "Lime": (0.000000000, 1.000000000, 0.000000000, 1.000000000),
    "LimeGreen": (0.196078449, 0.803921640, 0.196078449, 1.000000000),
    "Linen": (0.980392218, 0.941176534, 0.901960850, 1.000000000),
    "Magenta": (1.000000000, 0.000000000, 1.000000000, 1.000000000),
    "Maroon": (0.501960814, 0.000000000, 0.000000000, 1.000000000),
    "MediumAquamarine": (0.400000036, 0.803921640, 0.666666687, 1.000000000),
    "MediumBlue": (0.000000000, 0.000000000, 0.803921640, 1.000000000),
    "MediumOrchid": (0.729411781, 0.333333343, 0.827451050, 1.000000000),
    "MediumPurple": (0.576470613, 0.439215720, 0.858823597, 1.000000000),
    "MediumSeaGreen": (0.235294133, 0.701960802, 0.443137288, 1.000000000),
    "MediumSlateBlue": (0.482352972, 0.407843173, 0.933333397, 1.000000000),
    "MediumSpringGreen": (0.000000000, 0.980392218, 0.603921592, 1.000000000),
    "MediumTurquoise": (0.282352954, 0.819607913, 0.800000072, 1.000000000),
    "MediumVioletRed": (0.780392230, 0.082352944, 0.521568656, 1.000000000),
    "MidnightBlue": (0.098039225, 0.098039225, 0.439215720, 1.000000000),
    "MintCream": (0.960784376, 1.000000000, 0.980392218, 1.000000000),
    "MistyRose": (1.000000000, 0.894117713, 0.882353008, 1.000000000),
    "Moccasin": (1.000000000, 0.894117713, 0.709803939, 1.000000000),
    "NavajoWhite": (1.000000000, 0.870588303, 0.678431392, 1.000000000),
    "Navy": (0.000000000, 0.000000000, 0.501960814, 1.000000000),
    "OldLace": (0.992156923, 0.960784376, 0.901960850, 1.000000000),
    "Olive": (0.501960814, 0.501960814, 0.000000000, 1.000000000),
    "OliveDrab": (0.419607878, 0.556862772, 0.137254909, 1.000000000),
    "Orange": (1.000000000, 0.647058845, 0.000000000, 1.000000000),
    "OrangeRed": (1.000000000, 0.270588249, 0.000000000, 1.000000000),
    "Orchid": (0.854902029, 0.439215720, 0.839215755, 1.000000000),
    "PaleGoldenrod": (0.933333397, 0.909803987, 0.666666687, 1.000000000),
    "PaleGreen": (0.596078455, 0.984313786, 0.596078455, 1.000000000),
    "PaleTurquoise": (0.686274529, 0.933333397, 0.933333397, 1.000000000),
    "PaleVioletRed": (0.858823597, 0.439215720, 0.576470613, 1.000000000),
    "PapayaWhip": (1.000000000, 0.937254965, 0.835294187, 1.000000000),
    "PeachPuff": (1.000000000, 0.854902029, 0.725490212, 1.000000000),
    "Peru": (0.803921640, 0.521568656, 0.247058839, 1.000000000),
    "Pink": (1.000000000, 0.752941251, 0.796078503, 1.000000000),
    "Plum": (0.866666734, 0.627451003, 0.866666734, 1.000000000),
    "PowderBlue": (0.690196097, 0.878431439, 0.901960850, 1.000000000),
    "Purple": (0.501960814, 0.000000000, 0.501960814, 1.000000000),
    "Red": (1.000000000, 0.000000000, 0.000000000, 1.000000000),
    "RosyBrown": (0.737254918, 0.560784340, 0.560784340, 1.000000000),
    "RoyalBlue": (0.254901975, 0.411764741, 0.882353008, 1.000000000),
    "SaddleBrown": (0.545098066, 0.270588249, 0.074509807, 1.000000000),
    "Salmon": (0.980392218, 0.501960814, 0.447058856, 1.000000000),
    "SandyBrown": (0.956862807, 0.643137276, 0.376470625, 1.000000000),
    "SeaGreen": (0.180392161, 0.545098066, 0.341176480, 1.000000000),
    "SeaShell": (1.000000000, 0.960784376, 0.933333397, 1.000000000),
    "Sienna": (0.627451003, 0.321568638, 0.176470593, 1.000000000),
    "Silver": (0.752941251, 0.752941251, 0.752941251, 1.000000000),
    "SkyBlue": (0.529411793, 0.807843208, 0.921568692, 1.000000000),
    "SlateBlue": (0.415686309, 0.352941185, 0.803921640, 1.000000000),
    "SlateGray": (0.439215720, 0.501960814, 0.564705908, 1.000000000),
    "Snow": (1.000000000, 0.980392218, 0.980392218, 1.000000000),
    "SpringGreen": (0.000000000, 1.000000000, 0.498039246, 1.000000000),
    "SteelBlue": (0.274509817, 0.509803951, 0.705882370, 1.000000000),
    "Tan": (0.823529482, 0.705882370, 0.549019635, 1.000000000),
    "Teal": (0.000000000, 0.501960814, 0.501960814, 1.000000000),
    "Thistle": (0.847058892, 0.749019623, 0.847058892, 1.000000000),
    "Tomato": (1.000000000, 0.388235331, 0.278431386, 1.000000000),
    "Transparent": (0.000000000, 0.000000000, 0.000000000, 0.000000000),
    "Turquoise": (0.250980407, 0.878431439, 0.815686345, 1.000000000),
    "Violet": (0.933333397, 0.509803951, 0.933333397, 1.000000000),
    "Wheat": (0.960784376, 0.870588303, 0.701960802, 1.000000000),
    "White": (1.000000000, 1.000000000, 1.000000000, 1.000000000),
    "WhiteSmoke": (0.960784376, 0.960784376, 0.960784376, 1.000000000),
    "Yellow": (1.000000000, 1.000000000, 0.000000000, 1.000000000),
    "YellowGreen": (0.603921592, 0.803921640, 0.196078449, 1.000000000),
}

NAMED_COLORS: Mapping[str, Color] = MappingProxyType(
    {name: Color(*rgba) for name, rgba in _TABLE.items()}
)

_BY_KEY = {name.lower(): color for name, color in NAMED_COLORS.items()}

BLACK = NAMED_COLORS["Black"]
WHITE = NAMED_COLORS["White"]
RED = NAMED_COLORS["Red"]
GREEN = NAMED_COLORS["Green"]
BLUE = NAMED_COLORS["Blue"]
TRANSPARENT = NAMED_COLORS["Transparent"]


def color_by_name(name: str) -> Color:
    """Look up a named colour, ignoring case, spaces and underscores.

    Raises KeyError for an unknown name.
    """
    key = name.replace(" ", "").replace("_", "").lower()
    try:
        return _BY_KEY[key]
    except KeyError:
        raise KeyError(f"unknown colour name: {name!r}") from None