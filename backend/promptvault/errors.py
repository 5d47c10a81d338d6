"""Marketplace error taxonomy.

Every rejected operation raises one of these before touching the record
store. They subclass ValueError so callers can treat them like any other
bad-request condition.
"""


class MarketplaceError(ValueError):
    kind = "MarketplaceError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(MarketplaceError):
    kind = "InvalidInput"
    status_code = 400


class NotFound(MarketplaceError):
    kind = "NotFound"
    status_code = 404


class UserNotFound(MarketplaceError):
    kind = "UserNotFound"
    status_code = 404


class Unauthorized(MarketplaceError):
    kind = "Unauthorized"
    status_code = 403


class AlreadyExists(MarketplaceError):
    kind = "AlreadyExists"
    status_code = 409


class AlreadyPurchased(MarketplaceError):
    kind = "AlreadyPurchased"
    status_code = 409


class AlreadyLiked(MarketplaceError):
    kind = "AlreadyLiked"
    status_code = 409


class NotLiked(MarketplaceError):
    kind = "NotLiked"
    status_code = 409


class SelfPurchase(MarketplaceError):
    kind = "SelfPurchase"
    status_code = 403


class SelfRating(MarketplaceError):
    kind = "SelfRating"
    status_code = 403


class PurchaseRequired(MarketplaceError):
    kind = "PurchaseRequired"
    status_code = 403


class AccessDenied(MarketplaceError):
    kind = "AccessDenied"
    status_code = 403
