"""HTTP front end for the Pokemon cache, exposed as a WSGI application."""

from __future__ import annotations

import json
import logging
import posixpath
import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Callable, Iterable, Mapping

from .cache import CacheError, PokemonCache
from .models import Pokemon

logger = logging.getLogger(__name__)

_UINT32_MAX = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")
_TEXT_PLAIN = "text/plain; charset=utf-8"
_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class Response:
    """Status, headers and body of one HTTP response."""

    status: HTTPStatus
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class _Route:
    method: str
    segments: tuple[str | None, ...]
    handler: Callable[[str, bytes], Response]

    def match(self, parts: list[str]) -> str | None:
        """Return the wildcard value ('' when none) if the path fits, else None."""
        if len(parts) != len(self.segments):
            return None
        value = ""
        for part, expected in zip(parts, self.segments):
            if expected is None:
                if not part:
                    return None
                value = part
            elif part != expected:
                return None
        return value

    def allows(self, method: str) -> bool:
        return method == self.method or (self.method == "GET" and method == "HEAD")


def _text(status: HTTPStatus, text: str) -> Response:
    return Response(status, text.encode("utf-8"), {"Content-Type": _TEXT_PLAIN})


def _error(status: HTTPStatus, text: str) -> Response:
    return Response(
        status,
        text.encode("utf-8"),
        {"Content-Type": _TEXT_PLAIN, "X-Content-Type-Options": "nosniff"},
    )


def _encode_json(data: Any) -> bytes:
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    for raw, escaped in _JSON_ESCAPES.items():
        text = text.replace(raw, escaped)
    return text.encode("utf-8", "replace")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _decode_pokemon(body: bytes | str) -> Pokemon:
    text = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
    decoder = json.JSONDecoder(parse_constant=_reject_constant)
    data, _ = decoder.raw_decode(text.lstrip(" \t\r\n"))
    return Pokemon.from_dict(data)


def _parse_uint32(text: str) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _UINT32_MAX else None


def _clean_path(path: str) -> str:
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    if path.endswith("/") and cleaned != "/":
        cleaned += "/"
    return cleaned


def _pokemon_response(pokemon: Pokemon | None) -> Response:
    if pokemon is None:
        return Response(HTTPStatus.NOT_FOUND)
    return Response(HTTPStatus.OK, _encode_json(pokemon.to_dict()), {"Content-Type": _TEXT_PLAIN})


class Server:
    """Routes HTTP requests to a bounded Pokemon cache."""

    def __init__(self, max_capacity: int) -> None:
        self.cache = PokemonCache(max_capacity)
        self._routes = (
            _Route("GET", ("id", None), lambda arg, _body: self.handle_get_id(arg)),
            _Route("GET", ("name", None), lambda arg, _body: self.handle_get_name(arg)),
            _Route("POST", ("add",), lambda _arg, body: self.handle_post_add(body)),
            _Route("DELETE", ("id", None), lambda arg, _body: self.handle_delete(arg)),
        )

    def handle_get_id(self, id_text: str) -> Response:
        pokemon_id = _parse_uint32(id_text)
        if pokemon_id is None:
            return Response(HTTPStatus.BAD_REQUEST)
        return _pokemon_response(self.cache.get_by_id(pokemon_id))

    def handle_get_name(self, name: str) -> Response:
        return _pokemon_response(self.cache.get_by_name(name))

    def handle_post_add(self, body: bytes | str) -> Response:
        try:
            pokemon = _decode_pokemon(body)
        except ValueError as exc:
            logger.error("error decoding request: %s", exc)
            return Response(HTTPStatus.BAD_REQUEST)

        logger.info("adding pokemon %s", pokemon)
        try:
            self.cache.add(pokemon)
        except CacheError as exc:
            logger.error("error adding pokemon: %s", exc)
            return _text(HTTPStatus.INTERNAL_SERVER_ERROR, "error adding pokemon\n")
        return Response(HTTPStatus.OK)

    def handle_delete(self, id_text: str) -> Response:
        pokemon_id = _parse_uint32(id_text)
        if pokemon_id is None:
            return Response(HTTPStatus.BAD_REQUEST)
        try:
            self.cache.delete(pokemon_id)
        except CacheError as exc:
            logger.error("error deleting pokemon: %s", exc)
            return _text(HTTPStatus.INTERNAL_SERVER_ERROR, "error deleting pokemon\n")
        return Response(HTTPStatus.OK)

    def dispatch(self, method: str, path: str, body: bytes | str = b"") -> Response:
        """Route one request by method and (decoded) path."""
        cleaned = _clean_path(path)
        if cleaned != path:
            if method in ("GET", "HEAD"):
                page = f'<a href="{cleaned}">Moved Permanently</a>.\n\n'
                response = Response(
                    HTTPStatus.MOVED_PERMANENTLY,
                    page.encode("utf-8"),
                    {"Location": cleaned, "Content-Type": "text/html; charset=utf-8"},
                )
            else:
                response = Response(HTTPStatus.MOVED_PERMANENTLY, headers={"Location": cleaned})
            return self._finish(method, response)

        parts = cleaned[1:].split("/")
        allowed: set[str] = set()
        for route in self._routes:
            value = route.match(parts)
            if value is None:
                continue
            if route.allows(method):
                return self._finish(method, route.handler(value, body))
            allowed.add(route.method)
            if route.method == "GET":
                allowed.add("HEAD")

        if allowed:
            response = _error(HTTPStatus.METHOD_NOT_ALLOWED, "Method Not Allowed\n")
            headers = {**response.headers, "Allow": ", ".join(sorted(allowed))}
            return self._finish(method, Response(response.status, response.body, headers))
        return self._finish(method, _error(HTTPStatus.NOT_FOUND, "404 page not found\n"))

    @staticmethod
    def _finish(method: str, response: Response) -> Response:
        if method == "HEAD" and response.body:
            return Response(response.status, b"", response.headers)
        return response

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        raw_path = environ.get("PATH_INFO", "") or "/"
        try:
            path = raw_path.encode("latin-1").decode("utf-8", "replace")
        except UnicodeEncodeError:
            path = raw_path
        response = self.dispatch(method, path, _read_body(environ))
        headers = list(response.headers.items())
        headers.append(("Content-Length", str(len(response.body))))
        start_response(f"{response.status.value} {response.status.phrase}", headers)
        return [response.body]


def _read_body(environ: Mapping[str, Any]) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    stream = environ.get("wsgi.input")
    if length <= 0 or stream is None:
        return b""
    return stream.read(length)