import json
import logging
import re
from typing import Any, Dict, Iterable, Optional

from ...utils.helpers import call_with_deadline

logger = logging.getLogger(__name__)

LEADING_TIMESTAMP_RE = re.compile(r"^(\d+)")


def health_data_prefix(uid: str) -> str:
    return f"{uid}/healthdata/"


def blob_timestamp(name: str) -> int:
    """Leading numeric timestamp of the file part of a blob name; 0 if there is none."""
    filename = name.rsplit("/", 1)[-1]
    m = LEADING_TIMESTAMP_RE.match(filename)
    return int(m.group(1)) if m else 0


def select_latest_blob(blobs: Iterable[Any]):
    """Pick the blob whose filename carries the largest timestamp, or None."""
    latest = None
    for blob in blobs:
        if latest is None or blob_timestamp(blob.name) > blob_timestamp(latest.name):
            latest = blob
    return latest


def make_bucket(bucket_name: Optional[str], credentials_path: Optional[str] = None):
    """
    Initialise firebase_admin once per process and return the storage bucket.
    Returns None when no bucket is configured.
    """
    if not bucket_name:
        return None

    import firebase_admin
    from firebase_admin import credentials, storage

    if not firebase_admin._apps:
        cred = credentials.Certificate(credentials_path) if credentials_path else credentials.ApplicationDefault()
        firebase_admin.initialize_app(cred, {"storageBucket": bucket_name})
    return storage.bucket(bucket_name)


class HealthDataStore:
    """Reads a user's most recent health-data document from Firebase Storage.

    Layout: ``<uid>/healthdata/<timestamp>-<anything>.json``. Every failure
    (nothing stored, storage error, timeout, malformed JSON) is logged and
    reported as "no health data".
    """

    def __init__(self, bucket, timeout: Optional[float] = 15.0):
        self._bucket = bucket
        self._timeout = timeout

    def fetch_health_data(self, uid: str) -> Optional[Dict[str, Any]]:
        if self._bucket is None:
            logger.warning("Firebase Storage not configured, skipping health data fetch")
            return None

        prefix = health_data_prefix(uid)
        try:
            blobs = call_with_deadline(
                lambda: list(self._bucket.list_blobs(prefix=prefix, timeout=self._timeout)),
                timeout=self._timeout,
                what="health data listing",
            )
            latest = select_latest_blob(blobs)
            if latest is None:
                logger.warning("No health data found for uid: %s", uid)
                return None

            # the client timeout ends the request; the deadline guards the thread
            contents = call_with_deadline(
                lambda: latest.download_as_bytes(timeout=self._timeout),
                timeout=self._timeout,
                what="health data download",
            )
            return json.loads(contents.decode("utf-8"))
        except Exception:
            logger.exception("Error fetching health data for uid: %s", uid)
            return None
