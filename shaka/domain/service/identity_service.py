"""Identity of the signed-in user."""

from shaka.domain.value import Identity, UserId


class IdentityProvider:
    """Generic interface for whoever is acting on the comment thread.

    Passed explicitly to the use cases and controller instead of being
    looked up from a global auth singleton.
    """

    def current_user_id(self) -> UserId | None:
        """Return the signed-in user's id, or None when signed out."""
        raise NotImplementedError

    def display_name(self) -> str:
        """Return the name shown next to the user's comments."""
        raise NotImplementedError

    def identity(self) -> Identity:
        """Snapshot both values at once."""
        return Identity(user_id=self.current_user_id(), display_name=self.display_name())
