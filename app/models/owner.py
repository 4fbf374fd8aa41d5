from datetime import datetime, timezone
from ..extensions import db


class Owner(db.Model):
    __tablename__ = "owners"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=True, unique=True, index=True)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # has many pets
    pets = db.relationship(
        "Pet",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Pet.id",
    )

    def to_dict(self, with_pets: bool = False) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_pets:
            data["pets"] = [p.to_dict() for p in self.pets]
        return data
