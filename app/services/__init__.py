"""Services layer - Business logic"""

from .todo_service import TodoService
from .transfer_service import TransferService, TransferError, ImportFormatError

__all__ = ["TodoService", "TransferService", "TransferError", "ImportFormatError"]
