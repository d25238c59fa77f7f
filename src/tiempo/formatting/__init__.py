"""
Formatting: token format strings, short human formats, ISO strings and
localized relative distances.
"""

from .distance import intl_format_distance
from .iso import to_iso, to_iso9075, to_utc_string
from .locale_names import BabelFieldNames, FieldNameProvider
from .ordinal import ordinal, ordinal_suffix
from .plain_date import format_plain_date
from .simple import simple_format
from .zoned import format

__all__ = [
    "BabelFieldNames",
    "FieldNameProvider",
    "format",
    "format_plain_date",
    "intl_format_distance",
    "ordinal",
    "ordinal_suffix",
    "simple_format",
    "to_iso",
    "to_iso9075",
    "to_utc_string",
]
