from .dao import SessionDAO
from .models import SessionRecord

__all__ = ["SessionDAO", "SessionRecord"]
