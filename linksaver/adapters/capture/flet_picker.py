"""Image capture through Flet's FilePicker.

pick_files() only dispatches a request to the client; the result arrives as
an on_result event on another thread. capture() blocks the calling handler
thread until that event lands.
"""

import logging
import threading
from pathlib import Path

import flet as ft

from linksaver.domain.entities import CapturedImage

logger = logging.getLogger(__name__)


class FletImagePicker:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self._done = threading.Event()
        self._result: CapturedImage | None = None
        self._error: OSError | None = None
        self.picker = ft.FilePicker(on_result=self._on_result)
        page.overlay.append(self.picker)
        page.update()

    def _on_result(self, e: ft.FilePickerResultEvent) -> None:
        self._result = None
        self._error = None
        try:
            if e.files:
                picked = e.files[0]
                if picked.path:
                    self._result = CapturedImage(
                        name=picked.name,
                        data=Path(picked.path).read_bytes(),
                    )
                else:
                    logger.warning(f"Picked file {picked.name} has no local path")
        except OSError as err:
            self._error = err
        finally:
            self._done.set()

    def capture(self) -> CapturedImage | None:
        self._done.clear()
        self.picker.pick_files(
            dialog_title="Choose avatar",
            file_type=ft.FilePickerFileType.IMAGE,
            allow_multiple=False,
        )
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._result
