"""Vercel Python runtime handler for ``/api/credential``."""

from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler
from typing import Any

from apiserver.responses import json_response, preflight_response
from apiserver.routes.storage_credential import handle
from core.errors import InvalidRequestError
from core.log import configure_logging
from core.params import PROFILE_REALTIME

configure_logging()
logger = logging.getLogger(__name__)


class handler(BaseHTTPRequestHandler):
    def do_OPTIONS(self) -> None:
        self._send(preflight_response())

    def do_POST(self) -> None:
        try:
            raw = self._read_body()
        except InvalidRequestError as exc:
            logger.warning("Rejected request body: %s", exc)
            self.close_connection = True
            self._send(json_response(exc.status_code, exc.as_body()))
            return
        self._send(handle({"httpMethod": "POST", "body": raw}, profile=PROFILE_REALTIME))

    def _not_allowed(self) -> None:
        self._send(json_response(405, {"error": f"Method {self.command} not allowed"}))

    do_GET = _not_allowed
    do_PUT = _not_allowed
    do_DELETE = _not_allowed
    do_PATCH = _not_allowed

    def do_HEAD(self) -> None:
        self._send(json_response(405, {"error": "Method HEAD not allowed"}), include_body=False)

    def _read_body(self) -> bytes:
        if "chunked" in (self.headers.get("Transfer-Encoding") or "").lower():
            return self._read_chunked()
        raw_length = self.headers.get("Content-Length")
        if not raw_length:
            return b""
        try:
            length = int(raw_length)
        except ValueError as exc:
            raise InvalidRequestError("Invalid Content-Length header") from exc
        if length < 0:
            raise InvalidRequestError("Invalid Content-Length header")
        return self.rfile.read(length)

    def _read_chunked(self) -> bytes:
        chunks: list[bytes] = []
        while True:
            size_line = self.rfile.readline().split(b";", 1)[0].strip()
            try:
                size = int(size_line, 16)
            except ValueError as exc:
                raise InvalidRequestError("Malformed chunked request body") from exc
            if size == 0:
                break
            chunks.append(self.rfile.read(size))
            self.rfile.readline()
        # Drain trailers up to the terminating blank line.
        while self.rfile.readline() not in (b"\r\n", b"\n", b""):
            pass
        return b"".join(chunks)

    def _send(self, response: dict[str, Any], include_body: bool = True) -> None:
        body = response.get("body")
        payload = b""
        if body not in (None, ""):
            payload = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")

        self.send_response(response["statusCode"])
        for name, value in response.get("headers", {}).items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if payload and include_body:
            self.wfile.write(payload)

    def log_message(self, format: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), format % args)
