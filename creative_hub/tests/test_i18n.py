from __future__ import annotations

import pytest
from flask import Flask

from creative_hub.domain.i18n import (NAV_KEYS, TRANSLATIONS, resolve_translation,
                                      supported_languages)


def test_every_table_has_the_same_keys() -> None:
    expected = set(NAV_KEYS) | {"title", "tagline"}
    for code, table in TRANSLATIONS.items():
        assert set(table) == expected, code


@pytest.mark.parametrize("lang", ["fr", "ar", "de", "es"])
def test_known_language_is_resolved(lang: str) -> None:
    code, strings = resolve_translation(lang)

    assert code == lang
    assert strings["home"] == TRANSLATIONS[lang]["home"]
    assert strings["tagline"] == TRANSLATIONS[lang]["tagline"]


@pytest.mark.parametrize("lang", [None, "", "xx", "klingon"])
def test_unknown_language_falls_back_to_english(lang: str | None) -> None:
    code, strings = resolve_translation(lang)

    assert code == "en"
    assert strings == dict(TRANSLATIONS["en"])


def test_title_stays_english() -> None:
    _, strings = resolve_translation("de")

    assert strings["title"] == "Creative Services Hub"


def test_language_code_is_case_insensitive() -> None:
    assert resolve_translation("FR")[0] == "fr"


def test_i18n_endpoint(stateless_app: Flask) -> None:
    with stateless_app.test_client() as client:
        french = client.get("/api/i18n/fr")
        fallback = client.get("/api/i18n/zz")

    data = french.get_json()["data"]
    assert data["lang"] == "fr"
    assert data["strings"]["home"] == "Accueil"
    assert data["languages"] == supported_languages()
    assert fallback.get_json()["data"]["lang"] == "en"
