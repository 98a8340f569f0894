import signal
import socket
import threading
import time
import urllib.request
from http import HTTPStatus

import pytest

from webmux.app import App
from webmux.encoders import JSONEncoder
from webmux.server import Server


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_missing_port_raises():
    with pytest.raises(ValueError):
        Server("localhost", App()).listen_and_serve()


def test_serves_then_shuts_down_on_sigterm(capsys):
    app = App()
    app.handle_func("GET", "/ping", lambda r: JSONEncoder("pong"))
    port = _free_port()
    results = {}

    def client():
        url = f"http://127.0.0.1:{port}/ping"
        for _ in range(50):
            try:
                with urllib.request.urlopen(url, timeout=2) as resp:
                    results["status"] = resp.status
                    results["body"] = resp.read()
                break
            except OSError:
                time.sleep(0.05)
        signal.raise_signal(signal.SIGTERM)

    threading.Thread(target=client, daemon=True).start()
    Server(f"127.0.0.1:{port}", app, read_timeout=5).listen_and_serve()
    assert results["status"] == HTTPStatus.OK
    assert results["body"] == b'"pong"'
    assert "gracefully shutdown - signal: SIGTERM" in capsys.readouterr().out