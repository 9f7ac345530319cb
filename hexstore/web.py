"""HTTP adapter: a WSGI application exposing products as JSON."""

from __future__ import annotations

import json
import re
from decimal import Decimal
from typing import Any, Callable, Iterable
from wsgiref.simple_server import make_server

from hexstore.dto import ProductDTO
from hexstore.service import ProductService

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_PRODUCT_PATH = re.compile(r"^/product/([^/]+)$")
_JSON = ("Content-Type", "application/json")


def _encode_string(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch < " ":
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _encode_float(value: float) -> str:
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"unsupported value: {value!r}")
    text = repr(value)
    magnitude = abs(value)
    if magnitude == 0 or 1e-6 <= magnitude < 1e21:
        if "e" in text:
            text = format(Decimal(text), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return re.sub(r"e-0(\d)$", r"e-\1", text)


def json_error(message: str) -> bytes:
    """Encode ``message`` as a JSON object with a single "message" field."""
    return ('{"message":' + _encode_string(message) + "}").encode("utf-8")


def _encode_product(product: Any) -> bytes:
    body = (
        '{"ID":' + _encode_string(product.id)
        + ',"Name":' + _encode_string(product.name)
        + ',"Price":' + _encode_float(product.price)
        + ',"Status":' + _encode_string(product.status)
        + "}\n"
    )
    return body.encode("utf-8")


def _decode_product(body: bytes) -> ProductDTO:
    text = body.decode("utf-8").lstrip()
    if not text:
        raise ValueError("EOF")
    data, _ = json.JSONDecoder().raw_decode(text)
    if isinstance(data, dict):
        data = {key.lower(): value for key, value in data.items()}
    return ProductDTO.from_dict(data)


class ProductApp:
    """WSGI application serving GET /product/{id} and POST /product."""

    def __init__(self, service: ProductService) -> None:
        self.service = service

    def __call__(
        self, environ: dict, start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET").upper()
        path = environ.get("PATH_INFO", "") or "/"

        match = _PRODUCT_PATH.match(path)
        if match:
            if method not in ("GET", "OPTIONS"):
                return self._respond(start_response, "405 Method Not Allowed", b"", [])
            return self._get_product(start_response, match.group(1))
        if path == "/product":
            if method not in ("POST", "OPTIONS"):
                return self._respond(start_response, "405 Method Not Allowed", b"", [])
            return self._create_product(environ, start_response)
        return self._respond(
            start_response,
            "404 Not Found",
            b"404 page not found\n",
            [("Content-Type", "text/plain; charset=utf-8")],
        )

    @staticmethod
    def _respond(start_response, status, body, headers):
        start_response(status, headers + [("Content-Length", str(len(body)))])
        return [body]

    def _get_product(self, start_response, product_id):
        try:
            product = self.service.get(product_id)
        except Exception:  # any lookup failure is reported as not found
            return self._respond(start_response, "404 Not Found", b"", [_JSON])
        try:
            body = _encode_product(product)
        except ValueError:
            return self._respond(start_response, "500 Internal Server Error", b"", [_JSON])
        return self._respond(start_response, "200 OK", body, [_JSON])

    def _create_product(self, environ, start_response):
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        stream = environ.get("wsgi.input")
        raw = stream.read(length) if stream is not None and length > 0 else b""
        try:
            dto = _decode_product(raw)
            product = self.service.create(dto.name, dto.price)
            body = _encode_product(product)
        except Exception as exc:
            message = str(exc)
            return self._respond(
                start_response, "500 Internal Server Error", json_error(message), [_JSON]
            )
        return self._respond(start_response, "200 OK", body, [_JSON])


def serve(service: ProductService, host: str = "", port: int = 9000) -> None:
    """Serve the product API until interrupted."""
    with make_server(host, port, ProductApp(service)) as httpd:
        httpd.serve_forever()