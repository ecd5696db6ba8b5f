import pytest

from app.services.presentation import (
    PageHead,
    apply_side_effects,
    contact_message_link,
    get_initials,
    google_maps_link,
    map_embed_url,
    normalize_phone,
    whatsapp_link,
)
from app.services.reconstruction import SideEffect, build_side_effects


@pytest.mark.parametrize("name,expected", [
    ("Luis Ramos", "LR"),
    ("rosa díaz vega", "RD"),
    ("maría", "M"),
    ("  ana   lópez ", "AL"),
    ("", "U"),
    (None, "U"),
])
def test_get_initials(name, expected):
    assert get_initials(name) == expected


@pytest.mark.parametrize("phone,expected", [
    ("987654321", "51987654321"),
    ("51987654321", "51987654321"),
    ("+51 987 654 321", "51987654321"),
    ("(01) 234-5678", "51012345678"),
])
def test_normalize_phone(phone, expected):
    assert normalize_phone(phone) == expected


def test_whatsapp_link():
    link = whatsapp_link("987654321")
    assert link.startswith("https://wa.me/51987654321?text=")
    assert "Hola" in link
    assert "5151" not in whatsapp_link("51987654321")


def test_contact_message_link():
    link = contact_message_link("987 654 321", "Luis", "luis@mail.pe", "Quiero reservar")
    assert link.startswith("https://wa.me/51987654321?text=")
    assert "Luis" in link
    assert "luis%40mail.pe" in link


def test_map_urls():
    assert map_embed_url(-12.0464, -77.0428) == (
        "https://maps.google.com/maps?q=-12.0464,-77.0428&t=&z=15&ie=UTF8&iwloc=&output=embed"
    )
    assert google_maps_link("-12.0464", "-77.0428") == "https://www.google.com/maps?q=-12.0464,-77.0428"


def test_apply_side_effects_is_idempotent():
    record = {
        "title": "Café Aroma",
        "favicon_url": "http://x/favicon.ico",
        "seo_description": "Cafetería",
        "seo_keywords": "café",
        "fuente_principal": "Lato",
    }
    effects = build_side_effects(record)

    head = apply_side_effects(PageHead(), effects)
    apply_side_effects(head, effects)

    assert head.title == "Café Aroma"
    assert head.metas == {"description": "Cafetería", "keywords": "café"}
    assert len(head.links) == 2
    assert head.loaded_fonts == ["Lato"]
    # Lo ya cargado en la página no se vuelve a pedir
    assert build_side_effects(record, loaded_fonts=head.loaded_fonts)[-1].kind != "load_font"


def test_existing_favicon_is_updated_in_place():
    existing = {"rel": "icon", "type": "image/png", "href": "/old.png"}
    head = PageHead(links=[existing])

    apply_side_effects(head, [SideEffect("set_favicon", {
        "rel": "shortcut icon", "type": "image/x-icon", "href": "/new.ico",
    })])

    assert head.links == [existing]
    assert existing["href"] == "/new.ico"
    assert existing["type"] == "image/x-icon"


def test_unknown_effect_raises():
    with pytest.raises(ValueError):
        apply_side_effects(PageHead(), [SideEffect("play_music", {})])
