# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

"""
Session bootstrap over the REST API: exchanging credentials for an access token.

These calls happen before there is a token, so they don't go through the
authenticated GraphQL transport.
"""

import asyncio
import logging
import time

from typing import Any, Self

import httpx

from pydantic import validate_call

from ..errors import (
    FlyTransportError,
    NotFoundError,
    UnauthorizedError,
    UnknownServerError,
)
from ..graphql.client import decode_response
from ..models import NonEmptyStr
from ..settings import Settings
from .models import CLISessionAuth, SessionResponse


logger = logging.getLogger(__name__)


class SessionsClient:
    """Unauthenticated client for session endpoints."""

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the sessions client.

        Args:
            settings: Client settings; loaded from the environment when omitted
        """
        self.settings = settings if settings is not None else Settings()
        self.session = httpx.AsyncClient(timeout=self.settings.timeout)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.session.aclose()

    async def _make_request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self.settings.api_url(f"v1/{path}")
        try:
            return await self.session.request(method, url, **kwargs)
        except httpx.TransportError as err:
            raise FlyTransportError(f"Request to {url} failed: {err}") from err

    @validate_call
    async def get_access_token(
        self, email: NonEmptyStr, password: NonEmptyStr, otp: str = ""
    ) -> str:
        """
        Exchange user credentials for an access token.

        Args:
            email: Account email
            password: Account password
            otp: One-time password, when the account uses two-factor auth

        Returns:
            The access token
        """
        payload = {"data": {"attributes": {"email": email, "password": password, "otp": otp}}}
        response = await self._make_request("POST", "sessions", json=payload)

        if response.status_code >= 500:
            raise UnknownServerError()
        if response.status_code >= 400:
            raise UnauthorizedError("Incorrect email and password combination")

        return decode_response(response, SessionResponse).data.attributes.access_token

    @validate_call
    async def start_cli_session_web_auth(self, machine_name: NonEmptyStr) -> CLISessionAuth:
        """
        Start a browser-approved CLI session.

        Args:
            machine_name: Name identifying this machine to the user

        Returns:
            The session, with the URL the user needs to visit
        """
        response = await self._make_request("POST", "cli_sessions", json={"name": machine_name})
        if response.status_code != 201:
            raise UnknownServerError()
        return decode_response(response, CLISessionAuth)

    @validate_call
    async def get_access_token_for_cli_session(self, session_id: NonEmptyStr) -> CLISessionAuth:
        """
        Look up a CLI session; its access token is set once the user approves it.

        Args:
            session_id: ID returned by start_cli_session_web_auth

        Returns:
            The session
        """
        response = await self._make_request("GET", f"cli_sessions/{session_id}")
        if response.status_code == 404:
            raise NotFoundError(f"CLI session {session_id} not found")
        if response.status_code != 200:
            raise UnknownServerError()
        return decode_response(response, CLISessionAuth)

    async def wait_for_cli_session(self, session_id: str, timeout_s: float) -> CLISessionAuth:
        """
        Poll a CLI session until it has an access token or the timeout expires.

        Args:
            session_id: ID returned by start_cli_session_web_auth
            timeout_s: How long to keep polling

        Returns:
            The last session seen; its access_token is None if it was never approved
        """
        cutoff = time.time() + timeout_s
        interval_s = 2.0
        session = CLISessionAuth(id=session_id)
        while True:
            # Always try at least once.
            try:
                session = await self.get_access_token_for_cli_session(session_id)
            except NotFoundError:
                # The session may not be visible yet right after creation.
                logger.debug("CLI session %s not found yet", session_id)
            if session.access_token:
                return session

            # Aim for the final attempt to happen at cutoff time.
            remaining_s = cutoff - time.time()
            if remaining_s <= 0:
                return session
            await asyncio.sleep(min(interval_s, remaining_s))
            interval_s *= 2
