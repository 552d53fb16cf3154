class OutputWriter:
    """Strategy interface for persisting the cached output payload."""

    async def save_output(self, path: str, payload: str) -> str:
        """Write payload to path and return a confirmation message."""
        raise NotImplementedError
