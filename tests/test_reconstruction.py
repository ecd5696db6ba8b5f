import pytest

from app.services.landing_store import LandingStore, build_row_values
from app.services.reconstruction import (
    LOAD_FONT,
    SET_FAVICON,
    SET_META,
    SET_TITLE,
    UNAVAILABLE_MESSAGE,
    build_side_effects,
    decode_landing,
    google_font_url,
    reconstruct,
)


@pytest.fixture
def stored(db_session, draft):
    return LandingStore(db_session).create(draft)


def test_inactive_landing_is_unavailable(db_session, draft):
    draft.update(is_active=False, fuente_principal="Roboto")
    landing = LandingStore(db_session).create(draft)

    result = reconstruct(landing)

    assert result.available is False
    assert result.message == UNAVAILABLE_MESSAGE
    assert result.landing is None
    assert result.side_effects == []


def test_collections_decoded_from_text(stored, draft):
    result = reconstruct(stored)

    assert result.available is True
    for field in ("caracteristicas_list", "horarios_json", "testimonios_json",
                  "pagos_metodos", "productos_json", "galeria_imagenes"):
        assert result.landing[field] == draft[field]
    assert result.degraded_sections == []


def test_structured_collections_pass_through(draft):
    record = dict(build_row_values(draft, apply_defaults=True), id=1)
    record["galeria_imagenes"] = ["http://x/a.png", "http://x/b.png"]

    result = reconstruct(record)

    assert result.landing["galeria_imagenes"] == ["http://x/a.png", "http://x/b.png"]
    assert result.landing["horarios_json"] == draft["horarios_json"]


def test_malformed_collection_degrades_only_its_section(db_session, stored, draft):
    stored.horarios_json = "{esto no es json"
    db_session.commit()

    result = reconstruct(stored)

    assert result.available is True
    assert result.landing["horarios_json"] == []
    assert result.degraded_sections == ["horarios"]
    assert result.landing["testimonios_json"] == draft["testimonios_json"]
    assert result.landing["title"] == draft["title"]
    assert [e.kind for e in result.side_effects][0] == SET_TITLE


def test_items_with_wrong_shape_degrade_section(draft):
    record = build_row_values(draft, apply_defaults=True)
    record["galeria_imagenes"] = '[{"url": "http://x/a.png"}]'
    record["productos_json"] = '["solo texto"]'

    record, degraded = decode_landing(record)

    assert record["galeria_imagenes"] == []
    assert record["productos_json"] == []
    assert degraded == ["productos", "galeria"]


def test_testimonial_photo_stays_absent(stored):
    result = reconstruct(stored)
    assert "foto_url" not in result.landing["testimonios_json"][1]


def test_side_effects_order(db_session, draft):
    draft["fuente_principal"] = "Open Sans"
    landing = LandingStore(db_session).create(draft)

    effects = reconstruct(landing).side_effects

    assert [e.kind for e in effects] == [SET_TITLE, SET_FAVICON, SET_META, SET_META, LOAD_FONT]
    assert effects[0].payload == {"title": draft["title"]}
    assert effects[1].payload["href"] == draft["favicon_url"]
    assert effects[2].payload == {"name": "description", "content": draft["seo_description"]}
    assert effects[3].payload == {"name": "keywords", "content": draft["seo_keywords"]}
    assert effects[4].payload["family"] == "Open Sans"
    assert effects[4].payload["href"] == (
        "https://fonts.googleapis.com/css2?family=Open+Sans:wght@300;400;500;600;700&display=swap"
    )


def test_default_font_is_not_requested(stored):
    kinds = [e.kind for e in reconstruct(stored).side_effects]
    assert LOAD_FONT not in kinds


def test_font_already_loaded_is_skipped():
    record = {"fuente_principal": "Lato"}
    assert [e.kind for e in build_side_effects(record)] == [LOAD_FONT]
    assert build_side_effects(record, loaded_fonts={"Lato"}) == []


def test_missing_fields_emit_no_effects():
    assert build_side_effects({"title": "", "favicon_url": None}) == []


def test_section_visibility(stored):
    sections = reconstruct(stored).sections
    assert sections["pagos"] is False
    assert sections["inicio"] is True
    assert set(sections) == {
        "inicio", "descripcion", "caracteristicas", "horarios", "testimonios",
        "pagos", "productos", "galeria", "contacto", "mapa",
    }


def test_google_font_url():
    assert google_font_url("Playfair Display").startswith(
        "https://fonts.googleapis.com/css2?family=Playfair+Display:"
    )
