import threading

from qperf_ui.app_factory import create_app

BROWSER_DELAY_SECONDS = 1.0


def main() -> None:
    app = create_app()
    url = f"http://{app.config['HOST']}:{app.config['PORT']}/"
    if app.config["OPEN_BROWSER"]:
        # Give the server a moment to bind before the browser asks for the page.
        links = app.extensions["qperf"]["session"].links
        threading.Timer(BROWSER_DELAY_SECONDS, links.open, args=(url,)).start()
    # The reloader would start a second event-loop thread in the child process.
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    main()
