"""Operation-specific exceptions raised by the client facade."""

from typing import Any, Dict, Optional

from . import AssetsClientError


class OperationError(AssetsClientError):
    """Base class for errors wrapping a failed call to the server.

    Every subclass names the operation it belongs to, so callers can tell a
    failed search from a failed update without parsing messages. The wrapped
    exception is kept as ``__cause__`` and its code is copied to
    ``details["original_code"]``.
    """

    operation = "operation"
    default_code = "OPERATION_FAILED"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 502,
    ):
        super().__init__(
            message=message or f"{self.operation} failed",
            code=code or self.default_code,
            details={"operation": self.operation, **(details or {})},
            status_code=status_code,
        )

    @classmethod
    def wrap(
        cls,
        error: Exception,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> "OperationError":
        """Build an operation error from the exception raised by the gateway.

        Args:
            error: The original exception
            message: Context message; the original message is appended
            details: Identifiers of the failed call (query, ids, paths)

        Returns:
            Operation error ready to be raised ``from error``
        """
        status_code = getattr(error, "status_code", None)
        return cls(
            message=f"{message}: {error}",
            details={"original_code": getattr(error, "code", None), **(details or {})},
            status_code=status_code if isinstance(status_code, int) else 502,
        )


class SearchFailedError(OperationError):
    operation = "search"
    default_code = "SEARCH_FAILED"


class BrowseFailedError(OperationError):
    operation = "browse"
    default_code = "BROWSE_FAILED"


class CreateFailedError(OperationError):
    operation = "create"
    default_code = "CREATE_FAILED"


class UpdateFailedError(OperationError):
    operation = "update"
    default_code = "UPDATE_FAILED"


class UpdateBulkFailedError(OperationError):
    operation = "update_bulk"
    default_code = "UPDATE_BULK_FAILED"


class CheckoutFailedError(OperationError):
    operation = "checkout"
    default_code = "CHECKOUT_FAILED"


class CopyFailedError(OperationError):
    operation = "copy_asset"
    default_code = "COPY_FAILED"


class MoveFailedError(OperationError):
    operation = "move"
    default_code = "MOVE_FAILED"


class RemoveFailedError(OperationError):
    operation = "remove_asset"
    default_code = "REMOVE_FAILED"


class CreateRelationFailedError(OperationError):
    operation = "create_relation"
    default_code = "CREATE_RELATION_FAILED"


class RemoveRelationFailedError(OperationError):
    operation = "remove_relation"
    default_code = "REMOVE_RELATION_FAILED"


class GetFolderFailedError(OperationError):
    operation = "get_folder"
    default_code = "GET_FOLDER_FAILED"


class CreateFolderFailedError(OperationError):
    operation = "create_folder"
    default_code = "CREATE_FOLDER_FAILED"


class UpdateFolderFailedError(OperationError):
    operation = "update_folder"
    default_code = "UPDATE_FOLDER_FAILED"


class RemoveFolderFailedError(OperationError):
    operation = "remove_folder"
    default_code = "REMOVE_FOLDER_FAILED"


class DownloadFailedError(OperationError):
    operation = "download_original_file"
    default_code = "DOWNLOAD_FAILED"
