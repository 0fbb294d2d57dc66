class UserFacingExceptions(Exception):
    """Hierarchy of exceptions that end up being communicated
    to the end user, but do not produce error logs"""


class InvalidReleaseTypeError(UserFacingExceptions):
    def __init__(self, release_type):
        super().__init__(
            f'Invalid release type "{release_type}". '
            "A release type must not contain whitespace or start with a dash."
        )


class InvalidBuildNumberError(UserFacingExceptions):
    def __init__(self, value):
        super().__init__(
            f'Invalid commit count "{value}". Expected a non-negative integer.'
        )


class VersionGenerationError(UserFacingExceptions):
    """Raised at the cli boundary if no version could be produced."""

    def __init__(self, msg="Failed to generate version"):
        super().__init__(msg)
