"""
Document storage for reports, leads and analytics events.

Services talk to a small collection/document contract so the backing store can be
Firestore in production or an in-process dictionary in development and tests.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Minimal collection/document contract used by the services."""

    name: str = "abstract"

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        """Create or overwrite a document."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document data, or None when absent."""

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> bool:
        """Delete a document. Returns False when it did not exist."""

    @abstractmethod
    def find(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Return documents whose fields equal every value in ``filters``."""

    @abstractmethod
    def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching ``filters``."""

    def delete_where(self, collection: str, filters: Dict[str, Any]) -> int:
        """Delete every document matching ``filters`` and return how many were removed."""
        removed = 0
        for doc in self.find(collection, filters):
            if self.delete(collection, doc["id"]):
                removed += 1
        return removed


class MemoryDocumentStore(DocumentStore):
    """Process-local store. Data is lost on restart."""

    name = "memory"

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        with self._lock:
            self._collections.setdefault(collection, {})[doc_id] = copy.deepcopy(data)

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            return self._collections.get(collection, {}).pop(doc_id, None) is not None

    def find(self, collection, filters=None, order_by=None, descending=True, limit=None, offset=0):
        filters = filters or {}
        with self._lock:
            docs = [
                copy.deepcopy(doc)
                for doc in self._collections.get(collection, {}).values()
                if all(doc.get(key) == value for key, value in filters.items())
            ]

        if order_by:
            docs.sort(key=lambda d: (d.get(order_by) is None, d.get(order_by)), reverse=descending)

        docs = docs[offset:]
        if limit is not None:
            docs = docs[:limit]
        return docs

    def count(self, collection, filters=None) -> int:
        return len(self.find(collection, filters))

    def clear(self) -> None:
        with self._lock:
            self._collections.clear()


class FirestoreDocumentStore(DocumentStore):
    """Store backed by Cloud Firestore through firebase-admin."""

    name = "firestore"

    def __init__(self, db=None):
        if db is None:
            from app.core.firebase import init_firebase
            db = init_firebase()
        self.db = db

    def _query(self, collection: str, filters: Optional[Dict[str, Any]]):
        query = self.db.collection(collection)
        for key, value in (filters or {}).items():
            query = query.where(key, "==", value)
        return query

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        self.db.collection(collection).document(doc_id).set(data)

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        doc = self.db.collection(collection).document(doc_id).get()
        if not doc.exists:
            return None
        return doc.to_dict()

    def delete(self, collection: str, doc_id: str) -> bool:
        doc_ref = self.db.collection(collection).document(doc_id)
        if not doc_ref.get().exists:
            return False
        doc_ref.delete()
        return True

    def find(self, collection, filters=None, order_by=None, descending=True, limit=None, offset=0):
        from firebase_admin import firestore

        query = self._query(collection, filters)
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [doc.to_dict() for doc in query.stream()]

    def count(self, collection, filters=None) -> int:
        result = self._query(collection, filters).count().get()
        return int(result[0][0].value)


@lru_cache
def get_store() -> DocumentStore:
    """Return the process-wide document store selected by ``STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == "firestore":
        logger.info("Using Firestore document store")
        return FirestoreDocumentStore()
    logger.info("Using in-memory document store")
    return MemoryDocumentStore()
