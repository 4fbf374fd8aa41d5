import logging

from flask import Blueprint, jsonify

from ..errors import form_error
from ..extensions import db
from ..forms import OwnerForm, clean_text, json_formdata
from ..models.owner import Owner
from ..models.pet import Pet

logger = logging.getLogger(__name__)

owners_bp = Blueprint("owners", __name__)


def _get_owner_or_404(owner_id: int) -> Owner:
    return Owner.query.filter_by(id=owner_id).first_or_404(description="Owner not found.")


@owners_bp.get("/owners")
def list_owners():
    owners = Owner.query.order_by(Owner.id).all()
    return jsonify([o.to_dict() for o in owners])


@owners_bp.post("/owners")
def create_owner():
    form = OwnerForm(formdata=json_formdata())
    if not form.validate():
        return form_error(form)
    email = clean_text(form.email.data)
    if email:
        email = email.lower()
        if Owner.query.filter_by(email=email).first():
            return jsonify(error="Email is already registered."), 409
    owner = Owner(name=form.name.data.strip(), email=email)
    db.session.add(owner)
    db.session.commit()
    logger.info("Created owner %s", owner.id)
    return jsonify(owner.to_dict()), 201


@owners_bp.get("/owners/<int:owner_id>")
def get_owner(owner_id):
    return jsonify(_get_owner_or_404(owner_id).to_dict(with_pets=True))


@owners_bp.get("/owners/<int:owner_id>/pets")
def list_owner_pets(owner_id):
    owner = _get_owner_or_404(owner_id)
    pets = Pet.query.filter_by(owner_id=owner.id).order_by(Pet.id).all()
    return jsonify([p.to_dict() for p in pets])


@owners_bp.delete("/owners/<int:owner_id>")
def delete_owner(owner_id):
    owner = _get_owner_or_404(owner_id)
    pet_count = len(owner.pets)
    db.session.delete(owner)
    db.session.commit()
    logger.info("Deleted owner %s with %d pet(s)", owner_id, pet_count)
    return "", 204
