"""Running an app with graceful shutdown on SIGINT/SIGTERM."""

from __future__ import annotations

import queue
import signal
import threading
from dataclasses import dataclass
from typing import Callable, Optional
from wsgiref.simple_server import WSGIRequestHandler, make_server


@dataclass
class Server:
    """Serves a WSGI handler on an address until interrupted."""

    addr: str
    handler: Callable
    read_timeout: Optional[float] = None
    write_timeout: Optional[float] = None

    def listen_and_serve(self) -> None:
        host, sep, port = self.addr.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"invalid address {self.addr!r}: missing port")
        timeout = min((t for t in (self.read_timeout, self.write_timeout) if t), default=None)
        handler_class = type("_TimedHandler", (WSGIRequestHandler,), {"timeout": timeout})
        httpd = make_server(host.strip("[]"), int(port), self.handler, handler_class=handler_class)

        events: queue.Queue = queue.Queue()

        def serve():
            try:
                httpd.serve_forever()
            except BaseException as exc:
                events.put(exc)

        previous = {
            sig: signal.signal(sig, lambda signum, frame: events.put(signum))
            for sig in (signal.SIGINT, signal.SIGTERM)
        }
        thread = threading.Thread(target=serve, daemon=True)
        thread.start()
        try:
            while True:
                try:
                    event = events.get(timeout=0.1)
                    break
                except queue.Empty:
                    continue
            if isinstance(event, BaseException):
                raise event
            name = signal.Signals(event).name
            print(f"starting graceful shutdown - signal: {name}")
            httpd.shutdown()
            thread.join(5.0)
            if thread.is_alive():
                print("Cannot shutdown server gracefully")
                raise TimeoutError("server did not shut down in time")
            print(f"gracefully shutdown - signal: {name}")
        finally:
            httpd.server_close()
            for sig, handler in previous.items():
                signal.signal(sig, handler)