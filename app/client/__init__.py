from .api import PetsClient, PetDeletionError
from .store import PetListState

__all__ = ["PetsClient", "PetDeletionError", "PetListState"]
