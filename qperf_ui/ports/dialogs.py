from __future__ import annotations

from typing import Optional, Sequence, Union

from qperf_ui.domain.models import FileFilter


class FileDialogs:
    """Strategy interface for the native open/save dialogs."""

    async def open_files(
        self, *, multiple: bool, filters: Sequence[FileFilter]
    ) -> Union[str, Sequence[str], None]:
        """Return the chosen path(s), or None/empty when the user cancels."""
        raise NotImplementedError

    async def save_file(self, *, filters: Sequence[FileFilter]) -> Optional[str]:
        """Return the chosen destination, or None when the user cancels."""
        raise NotImplementedError
