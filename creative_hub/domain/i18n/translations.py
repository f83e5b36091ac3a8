# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Static string tables for the site's language switcher.

Only the navigation links and the header tagline are translated. The brand
title is always served in English, whatever the selected language.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_LANGUAGE = "en"

NAV_KEYS: tuple[str, ...] = ("home", "services", "tools", "contact", "help")

_TABLES: dict[str, dict[str, str]] = {
    "en": {
        "home": "Home",
        "services": "Services",
        "tools": "Tools",
        "contact": "Contact",
        "help": "Help",
        "title": "Creative Services Hub",
        "tagline": (
            "Unleash your brand's potential with our expert design, "
            "web development, and video editing services."
        ),
    },
    "fr": {
        "home": "Accueil",
        "services": "Services",
        "tools": "Outils",
        "contact": "Contact",
        "help": "Aide",
        "title": "Centre de Services Créatifs",
        "tagline": (
            "Libérez le potentiel de votre marque avec nos services experts en design, "
            "développement web et montage vidéo."
        ),
    },
    "ar": {
        "home": "الرئيسية",
        "services": "الخدمات",
        "tools": "الأدوات",
        "contact": "اتصل بنا",
        "help": "مساعدة",
        "title": "مركز الخدمات الإبداعية",
        "tagline": (
            "أطلق إمكانيات علامتك التجارية مع خدماتنا في التصميم "
            "وتطوير المواقع وتحرير الفيديو."
        ),
    },
    "de": {
        "home": "Startseite",
        "services": "Dienstleistungen",
        "tools": "Werkzeuge",
        "contact": "Kontakt",
        "help": "Hilfe",
        "title": "Kreativdienstleistungszentrum",
        "tagline": (
            "Entfesseln Sie das Potenzial Ihrer Marke mit unseren Experten für Design, "
            "Webentwicklung und Videobearbeitung."
        ),
    },
    "es": {
        "home": "Inicio",
        "services": "Servicios",
        "tools": "Herramientas",
        "contact": "Contacto",
        "help": "Ayuda",
        "title": "Centro de Servicios Creativos",
        "tagline": (
            "Libera el potencial de tu marca con nuestros servicios expertos en diseño, "
            "desarrollo web y edición de video."
        ),
    },
}

TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {code: MappingProxyType(table) for code, table in _TABLES.items()}
)


def supported_languages() -> list[str]:
    return list(TRANSLATIONS)


def resolve_translation(lang: str | None) -> tuple[str, dict[str, str]]:
    """Return ``(code, strings)`` for ``lang``, falling back to English.

    The returned ``title`` is the English brand name for every language.
    """
    code = (lang or "").strip().lower()
    if code not in TRANSLATIONS:
        code = DEFAULT_LANGUAGE
    strings = dict(TRANSLATIONS[code])
    strings["title"] = TRANSLATIONS[DEFAULT_LANGUAGE]["title"]
    return code, strings


__all__ = [
    "DEFAULT_LANGUAGE",
    "NAV_KEYS",
    "TRANSLATIONS",
    "resolve_translation",
    "supported_languages",
]
