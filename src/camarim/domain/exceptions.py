"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field failed validation (empty name, negative id/price/quantity)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ItemNotFoundError(EntityNotFoundError):
    """No catalog item with the given ID."""


class ArtistNotFoundError(EntityNotFoundError):
    """No artist with the given ID."""


class DressingRoomNotFoundError(EntityNotFoundError):
    """No dressing room (camarim) with the given ID."""


class RequestNotFoundError(EntityNotFoundError):
    """No supply request with the given ID."""


class ShoppingListNotFoundError(EntityNotFoundError):
    """No shopping list with the given ID."""


class RoomItemNotFoundError(EntityNotFoundError):
    """The item is not held in this dressing room."""


class RequestItemNotFoundError(EntityNotFoundError):
    """The item is not part of this request."""


class ShoppingListItemNotFoundError(EntityNotFoundError):
    """The item is not on this shopping list."""


class StockError(DomainException):
    """Central stock could not satisfy an operation."""


class StockItemNotFoundError(StockError, EntityNotFoundError):
    """The item has never been received into stock (or was issued to zero)."""


class InsufficientQuantityError(StockError):
    """Fewer units are on hand than were asked for."""

    def __init__(self, message: str, available: int, requested: int) -> None:
        super().__init__(message)
        self.available = available
        self.requested = requested


class DuplicateNameError(DomainException):
    """Another catalog item already uses this name."""


class InvalidOperationError(DomainException):
    """The operation is not permitted in the entity's current state."""
