from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from qperf_ui.domain.errors import DialogError
from qperf_ui.domain.models import FileFilter
from qperf_ui.ports.dialogs import FileDialogs


def _filetypes(filters: Sequence[FileFilter]) -> list[tuple[str, str]]:
    types = [(f.name, " ".join(f"*.{ext}" for ext in f.extensions)) for f in filters]
    types.append(("All Files", "*.*"))
    return types


class TkFileDialogs(FileDialogs):
    """
    Native dialogs through tkinter. Each call gets its own hidden, topmost
    root window. All dialogs run one at a time on a single dedicated thread,
    so tkinter is only ever driven from that thread and the event loop keeps going.
    """

    def __init__(self, title_prefix: str = "QPerformance"):
        self.title_prefix = title_prefix
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="qperf-dialogs")

    async def open_files(self, *, multiple: bool, filters: Sequence[FileFilter]):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._open_blocking, multiple, list(filters))

    async def save_file(self, *, filters: Sequence[FileFilter]) -> Optional[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._save_blocking, list(filters))

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    def _root(self):
        try:
            import tkinter as tk
        except ImportError as e:
            raise DialogError("tkinter is not available") from e
        try:
            root = tk.Tk()
        except tk.TclError as e:
            raise DialogError(f"Cannot open a window: {e}") from e
        root.withdraw()
        root.attributes("-topmost", True)
        return root

    def _open_blocking(self, multiple: bool, filters: list[FileFilter]):
        from tkinter import filedialog

        root = self._root()
        try:
            if multiple:
                picked = filedialog.askopenfilenames(
                    parent=root, title=f"{self.title_prefix} - select files", filetypes=_filetypes(filters)
                )
                return list(picked or ())
            return filedialog.askopenfilename(
                parent=root, title=f"{self.title_prefix} - select file", filetypes=_filetypes(filters)
            ) or None
        finally:
            root.destroy()

    def _save_blocking(self, filters: list[FileFilter]) -> Optional[str]:
        from tkinter import filedialog

        default_ext = f".{filters[0].extensions[0]}" if filters and filters[0].extensions else ""
        root = self._root()
        try:
            path = filedialog.asksaveasfilename(
                parent=root,
                title=f"{self.title_prefix} - save output",
                defaultextension=default_ext,
                filetypes=_filetypes(filters),
                confirmoverwrite=False,
            )
            return path or None
        finally:
            root.destroy()
