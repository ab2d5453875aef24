import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from sitewordcount.http_client import USER_AGENT, HTTPClient

PAGE = b"<html><body><p>hello world</p></body></html>"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            self._reply(200, PAGE)
        elif self.path == "/agent":
            self._reply(200, self.headers.get("User-Agent", "").encode())
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        else:
            self._reply(404, b"not found")

    def _reply(self, status, body):
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _fetch_all(urls):
    client = HTTPClient(timeout=5)
    got = {}
    for url in urls:
        client.add_request(url, lambda req_url, content: got.__setitem__(req_url, content))
    client.run()
    return got


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_successful_fetch_returns_body(base_url):
    url = f"{base_url}/ok"
    assert _fetch_all([url]) == {url: PAGE}


def test_http_error_gives_empty_body(base_url):
    url = f"{base_url}/missing"
    assert _fetch_all([url]) == {url: b""}


def test_redirects_are_followed(base_url):
    url = f"{base_url}/redirect"
    assert _fetch_all([url])[url] == PAGE


def test_user_agent_is_sent(base_url):
    url = f"{base_url}/agent"
    assert _fetch_all([url])[url] == USER_AGENT.encode()


def test_connection_failure_gives_empty_body():
    url = f"http://127.0.0.1:{_closed_port()}/"
    assert _fetch_all([url]) == {url: b""}


def test_malformed_url_gives_empty_body():
    assert _fetch_all(["not a url"]) == {"not a url": b""}


def test_every_callback_called_once(base_url):
    urls = [f"{base_url}/ok", f"{base_url}/missing", f"{base_url}/agent"]
    calls = []
    client = HTTPClient(timeout=5)
    for url in urls:
        client.add_request(url, lambda req_url, content: calls.append(req_url))
    client.run()
    assert sorted(calls) == sorted(urls)


def test_run_consumes_pending_requests(base_url):
    calls = []
    client = HTTPClient(timeout=5)
    client.add_request(f"{base_url}/ok", lambda req_url, content: calls.append(req_url))
    client.run()
    client.run()
    assert len(calls) == 1


def test_callbacks_run_on_calling_thread(base_url):
    threads = []
    client = HTTPClient(timeout=5)
    for path in ("/ok", "/missing"):
        client.add_request(base_url + path, lambda *_: threads.append(threading.get_ident()))
    client.run()
    assert threads == [threading.get_ident()] * 2