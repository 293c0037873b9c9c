import socket, logging

from httperrors import ConnectFailure, SendFailure, ReceiveFailure, OutputFailure

logger = logging.getLogger(__name__)

BUFSIZE = 4096  # max number of bytes read at once

def connect(host, port):
    """Resolve host:port and return the first TCP socket that connects"""
    try:
        addrs = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except (OSError, UnicodeError) as e:
        raise ConnectFailure(host, port, str(e)) from e

    last_err = None
    for af, socktype, proto, _, sa in addrs:
        s = None
        try:
            s = socket.socket(af, socktype, proto)
            s.connect(sa)
        except OSError as e:
            if s is not None:
                s.close()
            logger.debug(f"Connect to {sa} failed: {e}")
            last_err = e
            continue
        logger.debug(f"Connected to {host}:{port} via {sa}")
        return s

    reason = str(last_err) if last_err else "no addresses found"
    raise ConnectFailure(host, port, reason) from last_err

def send_request(conn, request):
    """Write the whole request to the connection and return its size"""
    try:
        conn.sendall(request)
    except OSError as e:
        raise SendFailure(f"send failed: {e}") from e
    logger.debug(f"Sent {len(request)} bytes")
    return len(request)

def relay(conn, sink):
    """Copy everything read from conn to sink until the peer closes.

    Chunks are written as received, with no reframing, so a ReceiveFailure
    is only raised after all earlier data has reached the sink.
    """
    total = 0

    def read():
        try:
            return conn.recv(BUFSIZE)
        except OSError as e:
            raise ReceiveFailure(f"recv failed after {total} bytes: {e}", total) from e

    for chunk in iter(read, b''):
        try:
            sink.write(chunk)
            sink.flush()
        except OSError as e:
            raise OutputFailure(f"write to output failed after {total} bytes: {e}") from e
        total += len(chunk)
    logger.debug(f"Relayed {total} bytes")
    return total
