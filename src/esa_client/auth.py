"""Authentication module for loading esa credentials.

This module handles loading the esa access token from environment variables
using python-dotenv. It validates that the token is present and raises
an appropriate error if it is missing.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

TOKEN_ENV_VAR = 'ESA_ACCESS_TOKEN'


class Credentials(NamedTuple):
    """esa API credentials."""
    access_token: str


class Authenticator:
    """Loads and validates the esa access token from environment variables.

    The token is loaded from the process environment (or a .env file via
    python-dotenv) and is never cached or logged.

    Required environment variables:
        ESA_ACCESS_TOKEN: Personal access token with write scope

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self, team: str = "unknown") -> Credentials:
        """Get esa credentials from environment variables.

        Args:
            team: esa team name, only used to give the error some context

        Returns:
            Credentials: A named tuple containing the access token

        Raises:
            InvalidCredentialsError: If the access token is missing or blank
        """
        access_token = os.getenv(TOKEN_ENV_VAR)

        if not access_token or not access_token.strip():
            raise InvalidCredentialsError(team=team, endpoint=TOKEN_ENV_VAR)

        return Credentials(access_token=access_token.strip())
