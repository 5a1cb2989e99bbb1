"""Development entrypoint.

The listener is bound to port 8000 on all interfaces. GOPOS_HOST and
GOPOS_PORT are read into the config but not applied here.
"""

from items_api import create_app
from items_api.logging_config import log_listener_settings

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8000

app = create_app()


if __name__ == "__main__":
    log_listener_settings(app, LISTEN_HOST, LISTEN_PORT)
    app.run(host=LISTEN_HOST, port=LISTEN_PORT, debug=False, threaded=True)
