from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from qperf_ui.domain.errors import PersistenceError
from qperf_ui.ports.persistence import OutputWriter

SAVED_MESSAGE = "Saved successfully"


@dataclass
class FileOutputRepository(OutputWriter):
    """
    Repository pattern: writes the output payload to the filesystem.
    Refuses to overwrite an existing file.
    """
    encoding: str = "utf-8"

    async def save_output(self, path: str, payload: str) -> str:
        return await asyncio.to_thread(self.write, path, payload)

    def write(self, path: str, payload: str) -> str:
        if not (path or "").strip():
            raise PersistenceError("Output file path is empty!")

        target = Path(path)
        if target.exists():
            raise PersistenceError("Output file already exists. Choose a different file name.")

        try:
            # "x" keeps the no-overwrite guarantee if the file appears meanwhile
            with target.open("x", encoding=self.encoding, newline="") as fh:
                fh.write(payload)
        except FileExistsError as e:
            raise PersistenceError("Output file already exists. Choose a different file name.") from e
        except OSError as e:
            raise PersistenceError(f"Error writing to output file: {e}") from e
        return SAVED_MESSAGE
