# exceptions raised by the farm model


class FarmError(Exception):
    """
    Base class for every error raised by the farm model.
    """


class DuplicateCustomerError(FarmError):
    """Raised when adding a customer that is already in the address book."""


class CustomerNotFoundError(FarmError):
    """Raised when an address book lookup finds no matching customer."""


class InvalidStockRequestError(FarmError):
    """
    Raised for stock requests the inventory cannot honour, e.g. bulk stocking
    against an inventory that only handles single units, or a bad quantity.
    """


class FailedTransactionError(FarmError):
    """
    Raised when a sale cannot proceed, e.g. opening a second transaction or
    removing products in bulk from an inventory that only handles single units.
    """
