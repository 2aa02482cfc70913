"""Gateway implementation on top of a requests session."""

from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from ..config.app import ClientConfig
from ..middleware.exceptions import AuthenticationError, TransportError
from ..middleware.logging import logger
from ..models.api.responses import LoginResponse

CHUNK_SIZE = 64 * 1024


class RequestsHttpGateway:
    """Talks to an Assets server over a single ``requests.Session``.

    Logs in lazily with ``services/apilogin`` on the first call when a user
    name is configured, keeps the session cookie and sends the CSRF token
    returned by the login on every following request. Failures are raised as
    ``TransportError``; nothing is retried.
    """

    def __init__(
        self, config: ClientConfig, session: Optional[requests.Session] = None
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Client configuration
            session: Session to use; a new one is created if omitted
        """
        self.config = config
        self.base_url = config.url.rstrip("/") + "/"
        self.session = session or requests.Session()
        self.csrf_token = ""
        self._logged_in = False

    def login(self) -> LoginResponse:
        """Log in with the configured credentials.

        Returns:
            The decoded login response

        Raises:
            AuthenticationError: If the server rejects the credentials
            TransportError: If the call fails
        """
        response = self._send(
            "POST",
            "services/apilogin",
            data={"username": self.config.username, "password": self.config.password},
        )
        login = LoginResponse.from_transport_json(self._decode(response))
        if not login.login_success:
            raise AuthenticationError(
                f"Login failed for user <{self.config.username}>: {login.login_fault_message}",
                details={"username": self.config.username},
            )

        self.csrf_token = login.csrf_token
        self._logged_in = True
        logger.info(
            "Logged in",
            extra={
                "username": self.config.username,
                "server_version": login.server_version,
            },
        )
        return login

    def service_request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        self._ensure_login()
        data = {key: value for key, value in params.items() if isinstance(value, str)}
        files = {key: value for key, value in params.items() if not isinstance(value, str)}
        response = self._send(
            "POST", f"services/{endpoint}", data=data, files=files or None
        )
        return self._decode(response)

    def api_request(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> Any:
        self._ensure_login()
        method = method.upper()
        if method == "GET":
            response = self._send(method, f"api/{path}", params=body)
        else:
            response = self._send(method, f"api/{path}", json=body)
        return self._decode(response)

    def raw_service_request(
        self, endpoint: str, params: Dict[str, Any]
    ) -> requests.Response:
        self._ensure_login()
        response = self._send("POST", f"services/{endpoint}", data=params, stream=True)
        self._check_stream(response)
        return response

    def write_response_body_to_path(
        self, response: requests.Response, target_path: str
    ) -> None:
        try:
            with open(target_path, "wb") as fp:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    fp.write(chunk)
        except (OSError, requests.exceptions.RequestException) as e:
            raise TransportError(
                f"Failed to write response body to <{target_path}>: {e}",
                code="WRITE_FAILED",
                details={"target_path": target_path, "url": response.url},
            ) from e
        finally:
            response.close()

        logger.debug(
            "Response body written",
            extra={"target_path": target_path, "url": response.url},
        )

    def download_file_to_path(self, url: str, target_path: str) -> None:
        self._ensure_login()
        response = self._send("GET", url, stream=True)
        self._check_stream(response)
        self.write_response_body_to_path(response, target_path)

    def _ensure_login(self) -> None:
        if self.config.username and not self._logged_in:
            self.login()

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Send a request and raise on transport errors and non-2xx statuses."""
        url = urljoin(self.base_url, path)
        headers = {"X-CSRF-TOKEN": self.csrf_token} if self.csrf_token else {}

        logger.debug("Sending request", extra={"method": method, "url": url})
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request {method} {url} failed: {e}",
                details={"method": method, "url": url},
            ) from e

        if not response.ok:
            err_msg = response.reason or "Error occurred"
            if response.text:
                try:
                    err_msg = response.json().get("message", err_msg)
                except (ValueError, AttributeError):
                    err_msg = response.text
            logger.error(
                f"HTTP Error {response.status_code} for {method} {url}: {err_msg}"
            )
            raise TransportError(
                f"HTTP Error {response.status_code}: {err_msg}",
                code="HTTP_ERROR",
                details={"method": method, "url": url},
                status_code=response.status_code,
            )

        return response

    def _decode(self, response: requests.Response) -> Any:
        """Decode a JSON body, treating an embedded ``errorcode`` as a failure."""
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed JSON in response from {response.url}",
                code="MALFORMED_JSON",
                details={"url": response.url},
            ) from e

        # The services endpoints report some errors with HTTP 200
        if isinstance(body, dict) and "errorcode" in body:
            raise self._server_error(body, response)
        return body

    def _check_stream(self, response: requests.Response) -> None:
        """Raise if a streamed file response is a JSON error body instead.

        JSON that is not an error passes through, since the file itself may
        be a JSON document.
        """
        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith("application/json"):
            return
        try:
            body = response.json()
        except ValueError:
            return
        if isinstance(body, dict) and "errorcode" in body:
            response.close()
            raise self._server_error(body, response)

    @staticmethod
    def _server_error(body: Dict[str, Any], response: requests.Response) -> TransportError:
        status_code = body.get("errorcode")
        return TransportError(
            f"Server error {status_code}: {body.get('message', '')}",
            code="SERVER_ERROR",
            details={"url": response.url},
            status_code=status_code if isinstance(status_code, int) else 502,
        )
