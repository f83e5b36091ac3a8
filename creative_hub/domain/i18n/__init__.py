# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .translations import (DEFAULT_LANGUAGE, NAV_KEYS, TRANSLATIONS,
                           resolve_translation, supported_languages)

__all__ = [
    "DEFAULT_LANGUAGE",
    "NAV_KEYS",
    "TRANSLATIONS",
    "resolve_translation",
    "supported_languages",
]
