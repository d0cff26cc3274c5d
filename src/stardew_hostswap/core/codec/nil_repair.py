"""Mark empty nullable fields with xsi:nil in serialized save text.

The tree cannot tell an empty string from a null value, so the game's schema-required
nil marker is restored on the serialized text instead.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from stardew_hostswap.config import NIL_ATTRIBUTE, NULLABLE_FIELDS


@lru_cache(maxsize=8)
def _empty_field_pattern(fields: tuple[str, ...]) -> re.Pattern[str]:
    names = "|".join(re.escape(f) for f in fields)
    # <field/>, <field />, <field></field>, <field>  </field >; never a tag with attributes
    return re.compile(rf"<(?P<tag>{names})\s*(?:/>|>\s*</(?P=tag)\s*>)")


def repair_nil_fields(text: str, *, fields: Iterable[str] = NULLABLE_FIELDS) -> str:
    """Rewrite empty occurrences of the nullable fields as ``<field xsi:nil="true" />``.

    Occurrences carrying attributes or content are left as they are, so applying the
    repair twice gives the same text as applying it once.
    """
    fields = tuple(fields)
    if not fields:
        return text
    name, value = NIL_ATTRIBUTE
    return _empty_field_pattern(fields).sub(rf'<\g<tag> {name}="{value}" />', text)
