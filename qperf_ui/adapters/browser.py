import logging
import webbrowser

from qperf_ui.ports.links import LinkOpener

logger = logging.getLogger(__name__)


class WebBrowserLinkOpener(LinkOpener):
    def open(self, url: str) -> None:
        if not webbrowser.open(url, new=2):
            logger.warning("No browser available to open %s", url)
