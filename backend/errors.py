class ValidationError(ValueError):
    """Missing or blank required input, rejected before touching the store."""


class NotFoundError(LookupError):
    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"{entity} no encontrado")


class StoreError(RuntimeError):
    """Any failure raised by the record store, surfaced with a generic message."""
