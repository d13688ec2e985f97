import base64
import binascii
import mimetypes
import re
import threading
from typing import Any, Callable, Optional, Tuple

from flask import current_app

from ..exceptions import VendorTimeoutError

DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.S)


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed"""
    return "." in filename and filename.rsplit(".", 1)[1].lower() in current_app.config['ALLOWED_EXTENSIONS']


def gather_image(request_files):
    """Return the uploaded image from form field 'image', or None"""
    f = request_files.get("image")
    return f if f and f.filename else None


def read_upload(f) -> Tuple[bytes, str]:
    """Read an uploaded file into memory and work out its MIME type"""
    if not allowed_file(f.filename):
        raise ValueError(f"bad_extension:{f.filename}")
    mime = f.mimetype
    if not mime or not mime.startswith("image/"):
        mime = mimetypes.guess_type(f.filename)[0] or "image/jpeg"
    return f.read(), mime


def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64," + base64.b64encode(data).decode("ascii")


def decode_data_url(url: str) -> Tuple[bytes, str]:
    """Split a base64 data URL (as produced by canvas.toDataURL) into bytes and MIME type"""
    if not isinstance(url, str):
        raise ValueError("expected a base64 data URL string")
    m = DATA_URL_RE.match(url.strip())
    if not m:
        raise ValueError("expected a base64 data URL")
    try:
        data = base64.b64decode(m.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
    return data, m.group("mime")


def call_with_deadline(fn: Callable[..., Any], *args, timeout: Optional[float], what: str = "call", **kwargs) -> Any:
    """
    Run a blocking call in a worker thread and wait at most `timeout` seconds.

    Raises VendorTimeoutError when the deadline passes. The worker cannot be
    killed; it finishes in the background and its result is dropped, so
    callers also pass the client library's own timeout to end the request.
    Exceptions raised by `fn` are re-raised in the caller.
    """
    if timeout is None:
        return fn(*args, **kwargs)

    box = {"res": None, "err": None}

    def worker():
        try:
            box["res"] = fn(*args, **kwargs)
        except BaseException as e:
            box["err"] = e

    t = threading.Thread(target=worker, daemon=True, name=f"deadline:{what}")
    t.start()
    t.join(timeout)
    if t.is_alive():
        raise VendorTimeoutError(what, timeout)
    if box["err"] is not None:
        raise box["err"]
    return box["res"]
