import logging

from flask import Blueprint, abort, jsonify, request

from ..errors import form_error
from ..extensions import db
from ..forms import PetForm, clean_text, json_formdata, json_null_fields
from ..models.owner import Owner
from ..models.pet import Pet

logger = logging.getLogger(__name__)

pets_bp = Blueprint("pets", __name__)

NULLABLE_FIELDS = {"species", "breed", "age", "notes", "owner_id"}


def _get_pet_or_404(pet_id: int) -> Pet:
    return Pet.query.filter_by(id=pet_id).first_or_404(description="Pet not found.")


def _check_owner(owner_id) -> None:
    if owner_id is not None and db.session.get(Owner, owner_id) is None:
        abort(404, description="Owner not found.")


def _apply_form(pet: Pet, form: PetForm, cleared=()) -> None:
    pet.name = form.name.data.strip()
    pet.species = clean_text(form.species.data)
    pet.breed = clean_text(form.breed.data)
    pet.age = form.age.data
    pet.notes = form.notes.data or None
    pet.owner_id = form.owner_id.data
    for field in NULLABLE_FIELDS.intersection(cleared):
        setattr(pet, field, None)


@pets_bp.get("/pets")
def list_pets():
    q = Pet.query
    species = request.args.get("species")
    if species:
        q = q.filter(Pet.species == species)
    owner_id = request.args.get("owner_id", type=int)
    if owner_id is not None:
        q = q.filter(Pet.owner_id == owner_id)
    pets = q.order_by(Pet.id).all()
    return jsonify([p.to_dict() for p in pets])


@pets_bp.get("/pets/<int:pet_id>")
def get_pet(pet_id):
    return jsonify(_get_pet_or_404(pet_id).to_dict())


@pets_bp.post("/pets")
def create_pet():
    form = PetForm(formdata=json_formdata())
    if not form.validate():
        return form_error(form)
    _check_owner(form.owner_id.data)
    pet = Pet()
    _apply_form(pet, form)
    db.session.add(pet)
    db.session.commit()
    logger.info("Created pet %s (%s)", pet.id, pet.name)
    return jsonify(pet.to_dict()), 201


@pets_bp.patch("/pets/<int:pet_id>")
def update_pet(pet_id):
    pet = _get_pet_or_404(pet_id)
    cleared = json_null_fields()
    form = PetForm(formdata=json_formdata(), obj=pet)
    if not form.validate():
        return form_error(form)
    if "name" in cleared:
        return jsonify(error="Invalid payload.", fields={"name": ["This field is required."]}), 400
    if "owner_id" not in cleared:
        _check_owner(form.owner_id.data)
    _apply_form(pet, form, cleared)
    db.session.commit()
    return jsonify(pet.to_dict())


@pets_bp.delete("/pets/<int:pet_id>")
def delete_pet(pet_id):
    pet = _get_pet_or_404(pet_id)
    db.session.delete(pet)
    db.session.commit()
    logger.info("Deleted pet %s", pet_id)
    return "", 204
