def build_request(host, port, path):
    """Build the GET request for /path; path must not carry a leading slash.

    Encoded back to the bytes the command line was given (utf-8 with
    surrogateescape, as sys.argv is decoded), so the path goes out untouched.
    """
    req = (f"GET /{path} HTTP/1.1\r\n"
           f"Host: {host}:{port}\r\n"
           "Connection: close\r\n"
           "\r\n")
    return req.encode("utf-8", errors="surrogateescape")
