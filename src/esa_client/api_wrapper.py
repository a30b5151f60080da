"""API wrapper for the esa REST API v1.

This module wraps a requests Session configured for esa and provides error
translation from HTTP and transport exceptions to our typed exception
hierarchy. Only post creation is needed for a migration run.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from requests import Request, Response, Session
from requests.exceptions import (
    ConnectionError,
    ConnectTimeout,
    InvalidHeader,
    InvalidURL,
    MissingSchema,
    ReadTimeout,
    RequestException,
    Timeout,
)

from src.models.esa_post import EsaPost

from .auth import Authenticator
from .errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    PayloadEncodingError,
    RequestBuildError,
)

logger = logging.getLogger(__name__)

ESA_API_BASE_URL = "https://api.esa.io/v1"
DEFAULT_TIMEOUT = 30


class APIWrapper:
    """Thin wrapper around a requests Session talking to one esa team.

    This class:
    1. Handles authentication using the Authenticator
    2. Encodes EsaPost objects into the create-post request body
    3. Translates transport and HTTP errors to typed exceptions

    Example:
        >>> auth = Authenticator()
        >>> api = APIWrapper(auth, team="docs")
        >>> created = api.create_post(post)
    """

    def __init__(
        self,
        authenticator: Authenticator,
        team: str,
        base_url: str = ESA_API_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """Initialize the API wrapper.

        Args:
            authenticator: Authenticator instance for loading credentials
            team: esa team name (the subdomain of <team>.esa.io)
            base_url: Root of the esa API
            timeout: Per-request timeout in seconds
        """
        self._authenticator = authenticator
        self.team = team
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._session: Optional[Session] = None

    @property
    def posts_endpoint(self) -> str:
        return f"{self.base_url}/teams/{self.team}/posts"

    def _get_session(self) -> Session:
        """Get or create the HTTP session.

        The session is created lazily on first use so that a missing token
        is reported before any request is attempted.

        Raises:
            InvalidCredentialsError: If the access token is missing
        """
        if self._session is None:
            creds = self._authenticator.get_credentials(team=self.team)
            session = Session()
            session.headers.update({
                'Authorization': f'Bearer {creds.access_token}',
                'Content-Type': 'application/json',
            })
            self._session = session
        return self._session

    def _validate_team(self) -> None:
        """Validate that the team name is safe to use in the URL path.

        Raises:
            RequestBuildError: If the team name is empty or malformed
        """
        if not self.team or not re.match(r'^[A-Za-z0-9][A-Za-z0-9_-]*$', self.team):
            raise RequestBuildError(
                self.posts_endpoint,
                f"Invalid team name: '{self.team}'"
            )

    def _sanitize_credentials(self, text: str) -> str:
        """Mask bearer tokens in error messages before they are logged.

        Example:
            >>> api._sanitize_credentials("Authorization: Bearer abc123")
            'Authorization: Bearer ***REDACTED***'
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Bearer\s+[^\s\'"]+',
            'Bearer ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'(access_?token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        return sanitized

    def _encode_payload(self, post: EsaPost) -> str:
        """Encode a post as the JSON request body.

        Raises:
            PayloadEncodingError: If the post contains values JSON cannot hold
        """
        try:
            return json.dumps(post.to_payload(), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PayloadEncodingError(post.name, str(e)) from e

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate transport exceptions to typed esa exceptions.

        Args:
            exception: The original exception from requests
            operation: Description of the operation that failed (for logging)

        Returns:
            Exception: Translated exception (one of our typed exceptions)
        """
        if isinstance(exception, (Timeout, ConnectTimeout, ReadTimeout, ConnectionError)):
            return APIUnreachableError(
                endpoint=self.posts_endpoint,
                reason=self._sanitize_credentials(str(exception)),
            )

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"esa API failure during {operation}")

    def _check_response(self, response: Response, operation: str) -> None:
        """Raise a typed exception for error statuses.

        Raises:
            InvalidCredentialsError: On 401 Unauthorized
            APIAccessError: On any other 4xx/5xx status
        """
        status_code = response.status_code
        if status_code < 400:
            return

        if status_code == 401:
            raise InvalidCredentialsError(team=self.team, endpoint=self.posts_endpoint)

        safe_body = self._sanitize_credentials(response.text or '')
        logger.debug(f"Error response body for {operation}: {safe_body}")
        raise APIAccessError(
            f"esa API returned {status_code} during {operation}",
            status_code=status_code
        )

    @staticmethod
    def _decode_response(response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def create_post(self, post: EsaPost) -> Dict[str, Any]:
        """Create a new post.

        Args:
            post: Post to create

        Returns:
            Dict containing the created post as returned by esa (empty when
            the response has no JSON object body)

        Raises:
            InvalidCredentialsError: If the token is missing or rejected
            PayloadEncodingError: If the post cannot be encoded as JSON
            RequestBuildError: If the request cannot be constructed
            APIUnreachableError: If the API is unreachable or times out
            APIAccessError: If esa answers with an error status
        """
        operation = f"create_post({post.name})"
        body = self._encode_payload(post)
        session = self._get_session()
        self._validate_team()

        try:
            prepared = session.prepare_request(
                Request('POST', self.posts_endpoint, data=body.encode('utf-8'))
            )
        except (InvalidURL, MissingSchema, InvalidHeader, ValueError) as e:
            raise RequestBuildError(
                self.posts_endpoint,
                self._sanitize_credentials(str(e))
            ) from e

        try:
            response = session.send(prepared, timeout=self.timeout)
        except RequestException as e:
            raise self._translate_error(e, operation) from e

        logger.debug(f"{operation} -> HTTP {response.status_code}")
        self._check_response(response, operation)

        created = self._decode_response(response)
        if created:
            logger.info(
                f"Created post #{created.get('number', '?')}: "
                f"{created.get('url', created.get('full_name', post.name))}"
            )
        return created
