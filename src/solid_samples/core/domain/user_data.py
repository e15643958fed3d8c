"""
User Data - The Single Responsibility Principle in miniature.

UserDataHolder only stores user data. Authentication, persistence and
presentation belong in other classes, so this one has a single reason to
change.
"""


class UserDataHolder:
    """Holds a single user data string."""
    
    def __init__(self, user_data: str = ""):
        self._user_data = user_data
    
    def get_user_data(self) -> str:
        """Get the stored user data ("" if never set)."""
        return self._user_data
    
    def set_user_data(self, user_data: str) -> None:
        """Overwrite the stored user data."""
        self._user_data = user_data
    
    user_data = property(get_user_data, set_user_data)
    
    def __repr__(self) -> str:
        return f"UserDataHolder(user_data={self._user_data!r})"
