"""Tests for picking and reading the latest health-data document."""

from fridgewise.services.storage.health_data_store import (
    HealthDataStore,
    blob_timestamp,
    health_data_prefix,
    select_latest_blob,
)
from tests._helpers.fakes import FakeBlob, FakeBucket


def test_latest_timestamp_wins():
    bucket = FakeBucket([
        FakeBlob("u1/healthdata/1700-a.json", {"file": "a"}),
        FakeBlob("u1/healthdata/1800-b.json", {"file": "b"}),
        FakeBlob("u2/healthdata/9999-z.json", {"file": "other user"}),
    ])

    assert HealthDataStore(bucket).fetch_health_data("u1") == {"file": "b"}
    assert bucket.prefixes == ["u1/healthdata/"]


def test_only_the_latest_blob_is_downloaded():
    old = FakeBlob("u1/healthdata/1700-a.json", {})
    new = FakeBlob("u1/healthdata/1800-b.json", {})

    HealthDataStore(FakeBucket([new, old])).fetch_health_data("u1")

    assert (old.downloads, new.downloads) == (0, 1)


def test_no_objects_means_no_data():
    assert HealthDataStore(FakeBucket([])).fetch_health_data("u1") is None


def test_no_bucket_means_no_data():
    assert HealthDataStore(None).fetch_health_data("u1") is None


def test_storage_errors_are_swallowed():
    bucket = FakeBucket(error=PermissionError("403 forbidden"))
    assert HealthDataStore(bucket).fetch_health_data("u1") is None


def test_malformed_json_is_swallowed():
    bucket = FakeBucket([FakeBlob("u1/healthdata/1-a.json", b"{oops")])
    assert HealthDataStore(bucket).fetch_health_data("u1") is None


def test_slow_download_is_treated_as_no_data():
    bucket = FakeBucket([FakeBlob("u1/healthdata/1-a.json", {"x": 1}, delay=1.0)])
    assert HealthDataStore(bucket, timeout=0.05).fetch_health_data("u1") is None


def test_blob_timestamp():
    assert blob_timestamp("u/healthdata/1800-b.json") == 1800
    assert blob_timestamp("u/healthdata/latest.json") == 0
    assert blob_timestamp("1700") == 1700


def test_select_latest_blob_empty():
    assert select_latest_blob([]) is None


def test_prefix():
    assert health_data_prefix("abc") == "abc/healthdata/"


def test_client_side_timeouts_are_passed_to_storage():
    blob = FakeBlob("u1/healthdata/1-a.json", {"x": 1})
    bucket = FakeBucket([blob])

    HealthDataStore(bucket, timeout=7.5).fetch_health_data("u1")

    assert bucket.timeouts == [7.5]
    assert blob.timeouts == [7.5]
