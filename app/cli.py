from __future__ import annotations

import asyncio

import click
import httpx
from flask import current_app

from .extensions import db
from .client import PetDeletionError, PetListState, PetsClient
from .models.owner import Owner
from .models.pet import Pet


def _db_uri() -> str:
    return current_app.config.get("SQLALCHEMY_DATABASE_URI", "")

@click.command("init-db")
def init_db_cmd():
    uri = _db_uri()
    click.echo(f"Creating tables on DB: {uri}")
    db.create_all()
    click.echo("✔ Tables created.")

@click.command("reset-db")
@click.option("--force", is_flag=True, help="Drop + create (irreversible).")
def reset_db_cmd(force: bool):
    uri = _db_uri()
    if not force:
        click.echo("Add --force to confirm dropping all tables.")
        return
    click.echo(f"Dropping & creating tables on DB: {uri}")
    db.drop_all()
    db.create_all()
    click.echo("✔ Database reset.")


DEMO_OWNERS = {
    ("Mira Petrova", "mira@paw.com"): [
        ("Maca", "Cat", "Mix", 3),
        ("Luna", "Cat", "Siamese", 5),
    ],
    ("Ivo Kolev", "ivo@paw.com"): [
        ("Rex", "Dog", "Labrador", 7),
        ("Pufi", "Rabbit", "Holland Lop", 2),
        ("Kaya", "Dog", "Poodle", 4),
    ],
}

@click.command("seed-demo")
def seed_demo_cmd():
    pets = 0
    for (name, email), owned in DEMO_OWNERS.items():
        if Owner.query.filter_by(email=email).first():
            continue
        owner = Owner(name=name, email=email)
        for pet_name, species, breed, age in owned:
            owner.pets.append(Pet(name=pet_name, species=species, breed=breed, age=age))
            pets += 1
        db.session.add(owner)
    db.session.commit()
    click.echo(f"✔ Seed done. Pets added: {pets}")


async def _delete_via_api(api_url: str, timeout: float, pet_id: int) -> list[dict]:
    async with PetsClient(api_url, timeout=timeout) as client:
        state = PetListState(client)
        await state.load()
        await state.delete_pet(pet_id)
        if state.error is not None:
            raise PetDeletionError(pet_id, state.error)
        return state.pet_list

@click.command("delete-pet")
@click.argument("pet_id", type=int)
@click.option("--api-url", default=None, help="Pets API base URL (defaults to PETS_API_URL).")
def delete_pet_cmd(pet_id: int, api_url: str | None):
    api_url = api_url or current_app.config["PETS_API_URL"]
    timeout = current_app.config.get("PETS_API_TIMEOUT", 10.0)
    try:
        remaining = asyncio.run(_delete_via_api(api_url, timeout, pet_id))
    except PetDeletionError as exc:
        raise click.ClickException(f"Could not delete pet {exc.pet_id}: {exc.message}")
    except (httpx.HTTPError, ValueError) as exc:
        raise click.ClickException(f"Could not load pets: {exc}")
    click.echo(f"✔ Pet {pet_id} deleted. {len(remaining)} pet(s) left:")
    for pet in remaining:
        click.echo(f"  #{pet['id']} {pet['name']}")
