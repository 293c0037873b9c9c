import socket, threading
from contextlib import closing

import pytest
from werkzeug.serving import make_server

from test_server.local_http_server import app

class FakeConn:
    """Scripted stand-in for a connected socket"""

    def __init__(self, chunks=(), send_error=None):
        self.chunks = list(chunks)
        self.send_error = send_error
        self.sent = b''
        self.recv_sizes = []
        self.closed = False

    def sendall(self, data):
        if self.send_error:
            raise self.send_error
        self.sent += data

    def recv(self, bufsize):
        self.recv_sizes.append(bufsize)
        if not self.chunks:
            return b''
        item = self.chunks.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True

@pytest.fixture
def fake_conn():
    return FakeConn

@pytest.fixture(scope="module")
def flask_server():
    """Run the local test server in a background thread and yield its port"""
    server = make_server("127.0.0.1", 0, app)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server.server_port
    server.shutdown()
    thread.join()

@pytest.fixture
def raw_server():
    """Listener that reads one request, answers with a fixed payload and closes.

    Yields serve(payload) -> (port, requests); requests fills in once the
    request has been read.
    """
    listener = socket.socket()
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    requests = []
    threads = []

    def handle(payload):
        conn, _ = listener.accept()
        with closing(conn):
            data = b''
            while b'\r\n\r\n' not in data:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                data += chunk
            requests.append(data)
            conn.sendall(payload)

    def serve(payload):
        t = threading.Thread(target=handle, args=(payload,), daemon=True)
        t.start()
        threads.append(t)
        return listener.getsockname()[1], requests

    yield serve
    for t in threads:
        t.join(timeout=5)
    listener.close()

@pytest.fixture
def closed_port():
    """A local port with nothing listening on it"""
    with closing(socket.socket()) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
