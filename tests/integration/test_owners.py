from app.extensions import db
from app.models.owner import Owner
from app.models.pet import Pet


def test_owner_has_many_pets(client, sample_data):
    rv = client.get(f"/owners/{sample_data['owner'].id}")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [p["name"] for p in data["pets"]] == ["Roshlyo", "Rex"]

def test_pet_belongs_to_owner(app, sample_data):
    assert sample_data["dog"].owner is sample_data["owner"]
    assert sample_data["stray"].owner is None

def test_owner_pets_endpoint(client, sample_data):
    rv = client.get(f"/owners/{sample_data['other'].id}/pets")
    assert rv.status_code == 200
    assert rv.get_json() == []

    rv = client.get("/owners/9999/pets")
    assert rv.status_code == 404

def test_create_owner(client, app):
    rv = client.post("/owners", json={"name": "Nina", "email": "Nina@Paw.com"})
    assert rv.status_code == 201
    assert rv.get_json()["email"] == "nina@paw.com"

def test_create_owner_duplicate_email(client, sample_data):
    rv = client.post("/owners", json={"name": "Copy", "email": "owner@example.com"})
    assert rv.status_code == 409
    assert Owner.query.count() == 2

def test_create_owner_invalid(client, app):
    rv = client.post("/owners", json={"name": "N", "email": "not-an-email"})
    assert rv.status_code == 400
    assert set(rv.get_json()["fields"]) == {"name", "email"}

def test_delete_owner_deletes_their_pets(client, sample_data):
    owner_id = sample_data["owner"].id
    rv = client.delete(f"/owners/{owner_id}")
    assert rv.status_code == 204
    assert db.session.get(Owner, owner_id) is None
    assert [p.name for p in Pet.query.all()] == ["Sisi"]

def test_list_owners(client, sample_data):
    rv = client.get("/owners")
    assert [o["name"] for o in rv.get_json()] == ["Owner", "Other"]
