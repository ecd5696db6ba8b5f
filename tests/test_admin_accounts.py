from app.models.admin import Admin
from app.services.admin_accounts import reconcile_admin


def test_new_admin_is_registered(db_session):
    admin, created = reconcile_admin(db_session, "g-1", "ana@landex.pe", "Ana", "http://x/ana.png")

    assert created is True
    assert admin.id is not None
    assert admin.role == "admin"
    assert admin.status == "activo"


def test_match_by_google_id_updates_profile(db_session):
    first, _ = reconcile_admin(db_session, "g-1", "ana@landex.pe", "Ana", None)
    again, created = reconcile_admin(db_session, "g-1", "ana@landex.pe", "Ana Torres", "http://x/nueva.png")

    assert created is False
    assert again.id == first.id
    assert again.name == "Ana Torres"
    assert again.picture == "http://x/nueva.png"
    assert db_session.query(Admin).count() == 1


def test_match_by_email_when_google_id_unknown(db_session):
    first, _ = reconcile_admin(db_session, "g-1", "ana@landex.pe", "Ana", None)
    again, created = reconcile_admin(db_session, "g-otro", "ana@landex.pe", "Ana", None)

    assert created is False
    assert again.id == first.id
    assert again.google_id == "g-1"
    assert db_session.query(Admin).count() == 1


def test_email_match_fills_missing_google_id(db_session):
    db_session.add(Admin(email="luis@landex.pe", name="Luis", role="admin", status="activo"))
    db_session.commit()

    admin, created = reconcile_admin(db_session, "g-9", "luis@landex.pe", "Luis", None)

    assert created is False
    assert admin.google_id == "g-9"
