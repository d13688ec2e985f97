import time

import pytest

from fridgewise.exceptions import VendorTimeoutError
from fridgewise.utils.helpers import call_with_deadline, decode_data_url, to_data_url


def test_data_url_round_trip():
    url = to_data_url(b"\x89PNG", "image/png")

    assert url.startswith("data:image/png;base64,")
    assert decode_data_url(url) == (b"\x89PNG", "image/png")


@pytest.mark.parametrize("url", ["", "hello", "data:image/jpeg;base64,@@@", "data:;base64,AAAA"])
def test_decode_data_url_rejects_garbage(url):
    with pytest.raises(ValueError):
        decode_data_url(url)


def test_deadline_returns_result():
    assert call_with_deadline(lambda a, b=0: a + b, 1, b=2, timeout=1.0) == 3


def test_deadline_reraises_errors():
    def boom():
        raise KeyError("x")

    with pytest.raises(KeyError):
        call_with_deadline(boom, timeout=1.0)


def test_deadline_expires():
    with pytest.raises(VendorTimeoutError) as exc:
        call_with_deadline(time.sleep, 1.0, timeout=0.05, what="sleepy vendor")
    assert "sleepy vendor" in str(exc.value)


def test_no_deadline_calls_inline():
    assert call_with_deadline(lambda: "ok", timeout=None) == "ok"


def test_decode_data_url_rejects_non_strings():
    with pytest.raises(ValueError):
        decode_data_url(5)
