class LinkOpener:
    """Strategy interface: open a URL in the platform browser, fire-and-forget."""

    def open(self, url: str) -> None:
        raise NotImplementedError
