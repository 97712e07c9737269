from enum import Enum

# The integrator loop works with these plain integer constants. The enum remains as a
# more user-friendly alternative that can, for example, give you the name of a status.
SUCCESS = 0
GENERAL_ERROR = 1
INVALID_STEP_SIZE = 2
NON_FINITE = 3


class Status(Enum):
    """A collection of all possible integration status codes.

    Any status other than `Status.SUCCESS` signifies some type of abnormal condition.
    """

    SUCCESS = SUCCESS
    GENERAL_ERROR = GENERAL_ERROR

    # The step size is zero or points away from the target, so the integration can
    # never make progress.
    INVALID_STEP_SIZE = INVALID_STEP_SIZE

    # A step produced an infinite or NaN value, e.g. from a division by a zero
    # coefficient or an overflow, and the integration was stopped.
    NON_FINITE = NON_FINITE
