"""User domain exceptions."""


class DuplicateIdentityError(Exception):
    """Username or email already taken, detected when persisting."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} already exists")
