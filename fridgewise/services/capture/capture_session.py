"""
Camera capture flow for the fridge/receipt scanner.

    idle --start--> active --capture--> captured --retake--> active
                                        captured --confirm--> (image handed to the scanner)
    any  --cancel--> closed

The camera itself is duck-typed: anything with ``open()``,
``snapshot() -> (bytes, mime_type)`` and ``release()``.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from ...utils.helpers import to_data_url

logger = logging.getLogger(__name__)


class CaptureState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    CAPTURED = "captured"
    CLOSED = "closed"


class CaptureStateError(RuntimeError):
    pass


class CaptureSession:
    def __init__(self, camera, auto_start: bool = False):
        self.camera = camera
        self.state = CaptureState.IDLE
        self._still: Optional[Tuple[bytes, str]] = None
        self._device_open = False
        if auto_start:
            self.start()

    def _require(self, *states: CaptureState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise CaptureStateError(f"cannot do that while {self.state.value} (needs {allowed})")

    def _release(self) -> None:
        if self._device_open:
            self.camera.release()
            self._device_open = False

    def start(self) -> None:
        self._require(CaptureState.IDLE)
        self.camera.open()
        self._device_open = True
        self.state = CaptureState.ACTIVE

    def capture(self) -> Tuple[bytes, str]:
        """Snapshot the current frame and release the camera."""
        self._require(CaptureState.ACTIVE)
        self._still = self.camera.snapshot()
        self._release()
        self.state = CaptureState.CAPTURED
        return self._still

    def retake(self) -> None:
        self._require(CaptureState.CAPTURED)
        self._still = None
        self.state = CaptureState.IDLE
        self.start()

    def confirm(self) -> Tuple[bytes, str]:
        self._require(CaptureState.CAPTURED)
        return self._still

    def confirm_as_data_url(self) -> str:
        data, mime = self.confirm()
        return to_data_url(data, mime)

    def cancel(self) -> None:
        self._release()
        self._still = None
        self.state = CaptureState.CLOSED
        logger.debug("capture session cancelled")
