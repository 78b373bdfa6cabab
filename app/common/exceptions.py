# app/common/exceptions.py


class FriendGraphError(Exception):
    """Base class for errors raised by the friend services."""

    status_code = 400
    detail = "Bad request"

    def __init__(self, detail: str = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class UserNotFoundError(FriendGraphError):
    status_code = 404
    detail = "User not found"


class FriendNotFoundError(FriendGraphError):
    """No accepted edge from the requester to the target."""

    status_code = 404
    detail = "Friend not found"


class FriendshipRequestNotFoundError(FriendGraphError):
    status_code = 404
    detail = "Friendship request not found"


class InvalidFriendshipRequestError(FriendGraphError):
    status_code = 400
    detail = "Invalid friendship request"


class FriendViewIntegrityError(FriendGraphError):
    """
    A composed friend row did not match FriendRead, e.g. a NULL count coming
    out of the joins. This is a query defect, never a client error.
    """

    status_code = 500
    detail = "Internal server error"


class FriendshipConflictError(FriendGraphError):
    status_code = 409
    detail = "Friendship was modified concurrently, retry the request"


class PhoneNumberTakenError(FriendGraphError):
    status_code = 409
    detail = "Phone number is already registered"
