#!/usr/bin/env python3

import sys, logging, argparse
from contextlib import closing

from httperrors import HTTPGetError, SendFailure
from httprelay import connect, send_request, relay
from httprequest import build_request
from httpurl import parse_url

logger = logging.getLogger("httpget")

class UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def build_parser():
    parser = UsageParser(prog="httpget", description="Fetch a URL with a single HTTP/1.1 GET and print the raw response")
    parser.add_argument('url', help='URL to fetch, as [http://]HOSTNAME[:PORT]/PATH')
    return parser

def http_get(url, sink):
    """Fetch url and copy the raw response to sink; returns the exit status"""
    parsed = parse_url(url)

    with closing(connect(parsed.host, parsed.port)) as s:
        send_error = None
        try:
            send_request(s, build_request(parsed.host, parsed.port, parsed.path))
        except SendFailure as e:
            # Drain whatever the server already sent anyway
            logger.error(str(e))
            send_error = e

        relay(s, sink)

    return send_error.exit_code if send_error else 0

def main(argv=None, sink=None):
    logging.basicConfig(level=logging.WARNING, format="httpget: %(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)
    if sink is None:
        sink = sys.stdout.buffer

    try:
        return http_get(args.url, sink)
    except HTTPGetError as e:
        logger.error(str(e))
        return e.exit_code

if __name__ == "__main__":
    sys.exit(main())
