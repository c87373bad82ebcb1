"""API wrapper for the Notion REST API.

This module wraps the notion-client SDK and provides error translation from
SDK exceptions to our typed exception hierarchy. Every listing operation
follows Notion's cursor pagination until the API reports no more results.
Requests are issued one at a time; there is no retry or backoff.
"""

import logging
import re
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx
from notion_client import Client
from notion_client.errors import APIErrorCode, APIResponseError, RequestTimeoutError
from notion_client.helpers import iterate_paginated_api

from src.models import Block, Database, Page
from .auth import Authenticator
from .errors import (
    NotionError,
    InvalidCredentialsError,
    ObjectNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
REQUEST_TIMEOUT_MS = 30_000


class APIWrapper:
    """Paginated Notion data source with error translation.

    This class provides a thin wrapper over the notion-client SDK that:
    1. Builds the client lazily from the injected Authenticator
    2. Exhausts cursor pagination for every listing call
    3. Converts raw API objects into models
    4. Translates SDK and transport errors to typed exceptions

    Example:
        >>> api = APIWrapper(Authenticator(api_key="ntn_..."))
        >>> for database in api.list_databases():
        ...     print(database.title)
    """

    def __init__(self, authenticator: Authenticator):
        """Initialize the API wrapper.

        Args:
            authenticator: Credential provider for the API key
        """
        self._authenticator = authenticator
        self._client: Optional[Client] = None

    def _get_client(self) -> Client:
        """Get or create the notion-client Client.

        Raises:
            InvalidCredentialsError: If no API key is configured
        """
        if self._client is None:
            creds = self._authenticator.get_credentials()
            self._client = Client(auth=creds.api_key, timeout_ms=REQUEST_TIMEOUT_MS)
        return self._client

    def _sanitize_credentials(self, text: str) -> str:
        """Mask Notion integration tokens and bearer headers in error text.

        Example:
            >>> api._sanitize_credentials("token ntn_abc123456789 rejected")
            'token ***REDACTED*** rejected'
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(r'\b(secret|ntn)_[A-Za-z0-9]+', '***REDACTED***', sanitized)
        return sanitized

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate SDK and transport exceptions to typed Notion exceptions.

        Args:
            exception: The original exception
            operation: Description of the failed operation, e.g.
                ``query_database_pages(<id>)``

        Returns:
            Exception: One of our typed exceptions
        """
        if isinstance(exception, (RequestTimeoutError, httpx.TimeoutException, httpx.TransportError)):
            reason = self._sanitize_credentials(str(exception)) or type(exception).__name__
            logger.error(f"API unreachable during {operation}: {reason}")
            return APIUnreachableError(reason=reason)

        if isinstance(exception, APIResponseError):
            if exception.code == APIErrorCode.Unauthorized:
                return InvalidCredentialsError(str(exception) or "API key is invalid")
            if exception.code == APIErrorCode.ObjectNotFound:
                object_id = None
                match = re.search(r'\(([^)]+)\)', operation)
                if match:
                    object_id = match.group(1)
                return ObjectNotFoundError(object_id)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(safe_error_msg or f"Notion API failure during {operation}")

    def _paginate(
        self,
        operation: str,
        function: Callable[..., Dict[str, Any]],
        **kwargs: Any
    ) -> Iterator[Dict[str, Any]]:
        """Yield every result of a cursor-paginated endpoint.

        Raises:
            NotionError: Translated from any failure while paging
        """
        try:
            yield from iterate_paginated_api(function, page_size=PAGE_SIZE, **kwargs)
        except NotionError:
            raise
        except Exception as e:
            raise self._translate_error(e, operation) from e

    def list_databases(self) -> List[Database]:
        """List every database shared with the integration.

        Raises:
            InvalidCredentialsError: If the API key is rejected
            APIUnreachableError: If the API is unreachable
            APIAccessError: For any other API failure
        """
        databases = [
            Database.from_api(item)
            for item in self._paginate(
                "list_databases()",
                lambda **kw: self._get_client().search(**kw),
                filter={"property": "object", "value": "database"},
            )
        ]
        logger.info(f"Found {len(databases)} accessible database(s)")
        return databases

    def retrieve_database(self, database_id: str) -> Database:
        """Fetch a single database by id.

        Raises:
            ObjectNotFoundError: If the database does not exist or is not shared
        """
        try:
            data = self._get_client().databases.retrieve(database_id=database_id)
        except NotionError:
            raise
        except Exception as e:
            raise self._translate_error(e, f"retrieve_database({database_id})") from e
        return Database.from_api(data)

    def query_database_pages(self, database_id: str) -> List[Page]:
        """Fetch all entries of a database in the order the API returns them.

        Raises:
            ObjectNotFoundError: If the database does not exist or is not shared
            InvalidCredentialsError: If the API key is rejected
            APIUnreachableError: If the API is unreachable
            APIAccessError: For any other API failure
        """
        pages = [
            Page.from_api(item)
            for item in self._paginate(
                f"query_database_pages({database_id})",
                lambda **kw: self._get_client().databases.query(**kw),
                database_id=database_id,
            )
            if item.get("object", "page") == "page"
        ]
        logger.info(f"Database {database_id} has {len(pages)} page(s)")
        return pages

    def list_block_children(self, container_id: str) -> Iterator[Block]:
        """Lazily yield the direct children of a page or block.

        Raises:
            NotionError: Translated from any failure while paging
        """
        logger.debug(f"Listing children of {container_id}")
        for item in self._paginate(
            f"list_block_children({container_id})",
            lambda **kw: self._get_client().blocks.children.list(**kw),
            block_id=container_id,
        ):
            yield Block.from_api(item)
