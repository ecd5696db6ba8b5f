from app.core.sections import (
    CATALOG,
    DEFAULT_FONT,
    DEFAULT_MAIN_COLOR,
    collection_fields,
    creation_defaults,
    get_section,
    landing_fields,
    section_for_collection,
    toggle_fields,
)
from app.models.landing import Landing
from app.schemas.landing import COLLECTION_ITEM_MODELS, LandingBase


def test_catalog_matches_orm_columns():
    columns = {c.name for c in Landing.__table__.columns}
    assert columns == set(landing_fields()) | {"id", "created_at", "updated_at"}


def test_catalog_matches_schema_fields():
    assert set(LandingBase.model_fields) == set(landing_fields())


def test_fields_are_unique():
    fields = landing_fields()
    assert len(fields) == len(set(fields))


def test_collections():
    assert collection_fields() == (
        "caracteristicas_list", "horarios_json", "testimonios_json",
        "pagos_metodos", "productos_json", "galeria_imagenes",
    )
    assert set(COLLECTION_ITEM_MODELS) == set(collection_fields())


def test_item_shapes_match_models():
    for collection, model in COLLECTION_ITEM_MODELS.items():
        section = section_for_collection(collection)
        if model is str:
            assert section.item_fields == ()
        else:
            assert set(model.model_fields) == set(section.item_fields)


def test_creation_defaults():
    defaults = creation_defaults()
    assert defaults["main_color"] == DEFAULT_MAIN_COLOR == "#21365E"
    assert defaults["fuente_principal"] == DEFAULT_FONT == "Poppins"
    assert defaults["is_active"] is True
    assert defaults["show_pagos"] is False
    for toggle in toggle_fields():
        if toggle != "show_pagos":
            assert defaults[toggle] is True


def test_get_section():
    assert get_section("testimonios").collection == "testimonios_json"
    assert get_section("mapa").scalars == ("mapa_title", "mapa_lat", "mapa_lng")
    assert len(CATALOG) == 12
