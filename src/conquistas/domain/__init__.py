"""Domain layer: entities and value objects. No dependencies on outer layers."""

from conquistas.domain.entities import MAX_RATING, MIN_RATING, Contact, Encounter

__all__ = ["MAX_RATING", "MIN_RATING", "Contact", "Encounter"]
