# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

from markupsafe import escape

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(value: Any) -> bool:
    """Return True when ``value`` has the ``local@domain.tld`` shape."""
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def normalize_email(value: str) -> str:
    return value.strip().lower()


# Characters express-validator escape() also encodes beyond markupsafe's set
_EXTRA_ENTITIES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})


def escape_html(value: str) -> str:
    escaped = str(escape(value)).replace("&#39;", "&#x27;").replace("&#34;", "&quot;")
    return escaped.translate(_EXTRA_ENTITIES)


__all__ = ["EMAIL_PATTERN", "escape_html", "is_valid_email", "normalize_email"]
