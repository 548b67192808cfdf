from .format_type import FormatType, max_non_hue
from .color_types import ColorSpace, ColorValue, RGBATuple, HSBATuple

__all__ = ["FormatType", "max_non_hue", "ColorSpace", "ColorValue", "RGBATuple", "HSBATuple"]
