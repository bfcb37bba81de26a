"""Domain error taxonomy."""


class HomebiteError(Exception):
    """Base class for marketplace domain errors."""

    code = "error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.__class__.__doc__ or self.code
        super().__init__(self.message)


class NotFoundError(HomebiteError):
    """Referenced meal or order does not exist."""

    code = "not_found"


class SoldOutError(HomebiteError):
    """No portions remaining for this meal."""

    code = "sold_out"


class InvalidTransitionError(HomebiteError):
    """Requested order status change is not allowed."""

    code = "invalid_transition"


class InvalidScoreError(HomebiteError):
    """Rating score must be an integer between 1 and 5."""

    code = "invalid_score"


class DuplicateRatingError(HomebiteError):
    """This order has already been rated."""

    code = "duplicate_rating"


class NotEligibleError(HomebiteError):
    """Caller is not eligible for this action."""

    code = "not_eligible"


class InvalidInputError(HomebiteError):
    """Request input is malformed."""

    code = "invalid_input"


class UnauthenticatedError(HomebiteError):
    """Sign in required."""

    code = "unauthenticated"
