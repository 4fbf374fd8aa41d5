from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import StringField, IntegerField, TextAreaField
from wtforms.fields import EmailField
from wtforms.validators import DataRequired, Email, Length, Optional, NumberRange


class PetForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=120)])
    species = StringField("Species", validators=[Optional(), Length(max=50)])
    breed = StringField("Breed", validators=[Optional(), Length(max=120)])
    age = IntegerField(
        "Age (years)", validators=[Optional(), NumberRange(min=0, max=1000)]
    )
    notes = TextAreaField("Notes", validators=[Optional()])
    owner_id = IntegerField("Owner", validators=[Optional()])


class OwnerForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(min=2, max=120)])
    email = EmailField("Email", validators=[Optional(), Email(), Length(max=255)])


def json_formdata() -> ImmutableMultiDict:
    """Request JSON body as form data; null values are left out."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return ImmutableMultiDict()
    return ImmutableMultiDict(
        {k: str(v) for k, v in payload.items() if v is not None and not isinstance(v, (dict, list))}
    )


def json_null_fields() -> set[str]:
    """Keys the request JSON body sets explicitly to null."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return set()
    return {k for k, v in payload.items() if v is None}


def clean_text(value) -> str | None:
    return (value or "").strip() or None
