from .formatter import default_format, format_lunar_date
from .tokens import Field, FieldKind, Literal, parse_format

__all__ = ["default_format", "format_lunar_date", "Field", "FieldKind", "Literal", "parse_format"]
