# webmux

A small WSGI web framework. Handlers take a `Request` and return an encoder
object; routes are grouped under path prefixes, middleware wraps handlers,
CORS headers can be switched on per application, and each route carries
documentation (summary, tags, parameters, body and responses) that can be
read back from the application.

## Install

```
pip install webmux
```

For running the tests:

```
pip install "webmux[test]"
pytest
```

## Handlers and encoders

A handler is called with a `webmux.app.Request` and returns a result that
`webmux.response.respond` turns into a reply:

- `webmux.encoders.JSONEncoder(data)` answers `200` with `application/json`.
- `webmux.encoders.JSONProblemEncoder(data)` answers `200` with
  `application/problem+json`.
- `webmux.response.NoResponse()` sends no body at all.
- `None` produces `204 No Content`.
- A result with an `http_status()` method uses that status; a result that is
  an exception instance uses `500`.

If encoding fails, the error is passed to the application's log function and
the client receives `500` with an empty body. Objects with a `to_dict()`
method are serialised through it by the JSON encoders.

```python
from webmux.app import App
from webmux.encoders import JSONEncoder


def log(message, *args):
    print(message, *args)


app = App(log)
api = app.router("/api")


def hello(request):
    return JSONEncoder({"hello": "world"})


api.get("/hello", hello).with_summary("Say hello").tag("greetings").ok(dict)
```

A `Request` has `method`, `path`, `headers` (lower-cased names), `query`
(as parsed by `urllib.parse.parse_qs`), `body`, `path_params`, and
`header(name, default="")` for case-insensitive lookup.

## Paths

Paths may hold wildcards: `{id}` matches one segment, `{rest...}` matches the
remainder, and a path ending in `/` matches everything below it unless it
ends in `{$}`. Captured values land in `request.path_params`. The most
specific matching pattern wins. Unmatched paths get `404`, a known path with
the wrong method gets `405` with an `Allow` header, and `HEAD` is served by
`GET` handlers without a body. Registering the same method and path twice
raises `ValueError`.

## Routers and routes

`App.router(prefix)` returns a `Router`; `Router.subrouter(prefix)` nests
prefixes (`webmux.router.join_path` does the joining). `get`, `post`, `put`,
`patch` and `delete` register a handler and return a `webmux.route.Route`,
which is documented fluently with `with_summary`, `with_description`,
`tag`, `with_body`, `param`, `path_param`, `query_param`, `header_param` and
`response`, or the shortcuts `ok`, `created`, `bad_request`, `not_found` and
`internal_error`. Parameter locations and types are the `ParamLocation` and
`DataType` enums. `App.routes()` lists every registered route in order.

## Middleware

A middleware takes a handler and returns a handler. Application-wide
middleware is passed to `App(...)` or added with `App.use`; per-route
middleware is passed after the handler. The first middleware in a list is
the outermost, and `None` entries are skipped. Application middleware is
applied when a route is registered, so call `use` before adding routes.

```python
def timing(handler):
    def wrapped(request):
        return handler(request)
    return wrapped


app.use(timing)
api.post("/items", hello, timing)
```

## CORS

```python
app.enable_cors(["https://frontend.example.com"])
```

With CORS enabled, a request whose `Origin` matches a listed origin (or any
origin, if `"*"` is listed) gets `Access-Control-Allow-Origin`; every
response carries the allowed methods, headers and max-age, and `OPTIONS`
requests are answered with `200` at once. Other responses also carry a
`Strict-Transport-Security` header.

## Serving

`App` is a WSGI application, so it can be handed to any WSGI server, or run
with `webmux.server.Server`, built on `wsgiref`, which stops gracefully on
SIGINT or SIGTERM:

```python
from webmux.server import Server

Server(addr="127.0.0.1:8080", handler=app).listen_and_serve()
```

`read_timeout` and `write_timeout` (seconds) set the socket timeout of each
connection; an address without a port raises `ValueError`.

## What it does not do

Route documentation is stored on each `Route` and can be read back through
`App.routes()`, but the package does not build an OpenAPI document from it
and does not serve a Swagger UI page. There is no command-line program.