from ytclone.db.models.user import User
from ytclone.db.models.history import History, ActionType
from ytclone.db.models.favorite import Favorite

__all__ = ["User", "History", "ActionType", "Favorite"]
