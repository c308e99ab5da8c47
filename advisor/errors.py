"""Input errors raised by the advisor core.

Every error here is recoverable: the caller that supplied the bad input
re-prompts instead of aborting the session.
"""


class AdvisorError(ValueError):
    """Base class for rejected input."""


class InvalidCardFormat(AdvisorError):
    pass


class DuplicateCard(AdvisorError):
    pass


class InvalidAmount(AdvisorError):
    pass


class InvalidRange(AdvisorError):
    pass


class InvalidHandSize(AdvisorError):
    pass


class InvalidCallCount(AdvisorError):
    pass


class StreetOutOfOrder(AdvisorError):
    pass
