# Document-store adapter: persists analytics events to Firestore
# analytics/services/store.py
import json
from typing import Protocol

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore
from google.oauth2 import service_account

from analytics.models.log import LogEntry
from analytics.utils.config import StoreConfig
from analytics.utils.logger import logger

COLLECTION_NAME = "event_logs"


class StoreError(Exception):
    """Base class for document-store failures."""


class StoreConnectionError(StoreError):
    """The store could not be initialized (credentials or client setup)."""


class StorageError(StoreError):
    """A write to the store failed."""


class LogStore(Protocol):
    @property
    def available(self) -> bool: ...

    def save(self, entry: LogEntry) -> None: ...

    def close(self) -> None: ...


class FirestoreStore:
    def __init__(self, client: firestore.Client):
        self._client = client
        self._closed = False

    @property
    def available(self) -> bool:
        return not self._closed

    def save(self, entry: LogEntry) -> None:
        """Appends the entry as a new document in the event_logs collection."""
        try:
            self._client.collection(COLLECTION_NAME).add(entry.model_dump())
        except (api_exceptions.GoogleAPIError, ValueError, TypeError) as e:
            logger.error(f"Failed to add to firestore: {e}")
            raise StorageError(f"could not write to '{COLLECTION_NAME}': {e}") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._client.close()
        logger.info("Firestore client closed.")


class UnavailableStore:
    """Stand-in used when the real store could not be initialized."""

    def __init__(self, reason: str = "store not initialized"):
        self.reason = reason

    @property
    def available(self) -> bool:
        return False

    def save(self, entry: LogEntry) -> None:
        raise StorageError(f"store unavailable: {self.reason}")

    def close(self) -> None:
        pass


def _load_credentials(config: StoreConfig):
    """Returns explicit credentials, or None to use Application Default Credentials."""
    if config.credentials_source == "file":
        if not config.credentials_file:
            raise StoreConnectionError("credentials_source is 'file' but no credentials file is configured")
        return service_account.Credentials.from_service_account_file(config.credentials_file)

    if config.credentials_source == "env":
        if not config.credentials_json:
            raise StoreConnectionError("credentials_source is 'env' but FIRESTORE_CREDENTIALS_JSON is empty")
        info = json.loads(config.credentials_json)
        if not isinstance(info, dict):
            raise StoreConnectionError("FIRESTORE_CREDENTIALS_JSON must hold a service-account JSON object")
        return service_account.Credentials.from_service_account_info(info)

    return None


def initialize_store(config: StoreConfig) -> FirestoreStore:
    """
    Builds a Firestore client from the given configuration.
    Raises StoreConnectionError if credentials cannot be found or the client cannot be created.
    """
    try:
        credentials = _load_credentials(config)
        project = config.project_id
        if project is None and credentials is not None:
            project = getattr(credentials, "project_id", None)

        client_kwargs = {"project": project, "credentials": credentials}
        if config.database:
            client_kwargs["database"] = config.database
        client = firestore.Client(**client_kwargs)
    except StoreConnectionError:
        raise
    except (auth_exceptions.GoogleAuthError, ValueError, OSError) as e:
        raise StoreConnectionError(f"error initializing firestore client: {e}") from e

    logger.info(
        f"Connected to Firestore project '{client.project}' "
        f"(credentials source: {config.credentials_source})."
    )
    return FirestoreStore(client)
