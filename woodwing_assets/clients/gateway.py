from typing import Any, Dict, Optional, Protocol

import requests


class HttpGateway(Protocol):
    def service_request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """POST form parameters to a ``services/`` endpoint.

        A ``Filedata`` entry holding a file handle turns the request into a
        multipart upload.

        Args:
            endpoint: Endpoint name, e.g. "search" or "checkout/<id>".
            params: Flat parameter map; values are strings or file handles.
        Returns:
            The decoded JSON body.
        Raises:
            TransportError: If the call fails or the body is not JSON.
        """
        ...

    def api_request(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send a JSON request to an ``api/`` path.

        Args:
            method: HTTP method.
            path: Path below ``api/``, e.g. "folder/get".
            body: JSON body, if any.
        Returns:
            The decoded JSON body, or an empty dict for an empty body.
        Raises:
            TransportError: If the call fails or the body is not JSON.
        """
        ...

    def raw_service_request(
        self, endpoint: str, params: Dict[str, Any]
    ) -> requests.Response:
        """POST to a ``services/`` endpoint and return the streamed response.

        Raises:
            TransportError: If the call fails.
        """
        ...

    def write_response_body_to_path(
        self, response: requests.Response, target_path: str
    ) -> None:
        """Stream the body of a raw response into a local file.

        Raises:
            TransportError: If reading the body or writing the file fails.
        """
        ...

    def download_file_to_path(self, url: str, target_path: str) -> None:
        """Download a file URL served by the Assets server into a local file.

        Raises:
            TransportError: If the download fails.
        """
        ...
