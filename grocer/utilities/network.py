"""Startup URL helpers for the Grocer API server.

`grocer.main` prints where the API can be reached; the LAN address is
resolved by asking the OS which interface would route to a public IP
(a UDP connect sends nothing on the wire).
"""
import socket
from typing import List

LOOPBACK = ("127.0.0.1", "localhost")


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'."""
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int) -> List[str]:
    """Local URL first, then the LAN URL when one is available."""
    urls = [f"http://localhost:{port}"]
    local_ip = get_local_ip()
    if local_ip not in LOOPBACK:
        urls.append(f"http://{local_ip}:{port}")
    return urls
