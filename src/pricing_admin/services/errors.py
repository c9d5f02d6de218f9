"""
Domain errors raised by the service layer.

Each error carries a stable ``code`` and the HTTP status the API maps it to.
"""


class CatalogError(Exception):
    """Base class for expected catalog/pricing failures."""
    code = 'catalog_error'
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {'error': self.message, 'code': self.code}


class ValidationError(CatalogError):
    """Client input is malformed or violates a business rule."""
    code = 'validation_error'


class MissingFieldError(ValidationError):
    code = 'missing_field'

    def __init__(self, *fields: str):
        self.fields = fields
        if len(fields) == 1:
            message = f"{fields[0]} is required"
        elif len(fields) == 2:
            message = f"{fields[0]} and {fields[1]} are required"
        else:
            message = f"{', '.join(fields[:-1])}, and {fields[-1]} are required"
        super().__init__(message)


class InvalidMinQtyError(ValidationError):
    code = 'invalid_min_qty'

    def __init__(self, message: str = "minQty must be an integer >= 1"):
        super().__init__(message)


class InvalidPriceError(ValidationError):
    code = 'invalid_price'

    def __init__(self, message: str = "price must be > 0"):
        super().__init__(message)


class InvalidQuantityError(ValidationError):
    code = 'invalid_quantity'

    def __init__(self, message: str = "qty must be an integer >= 1"):
        super().__init__(message)


class DuplicateMinQtyError(ValidationError):
    code = 'duplicate_min_qty'

    def __init__(self, min_qty: int):
        self.min_qty = min_qty
        super().__init__("A price tier with this minimum quantity already exists")


class NotFoundError(CatalogError):
    """A referenced identifier does not resolve."""
    code = 'not_found'
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
