# saba

A small HTTP/1.1 client that comes with its own URL and response parsing.
It only speaks plain `http://`, with no TLS.

## Installation

```
pip install .
```

## Command line

```
saba [host] [port] [path]
```

All three arguments are optional. They default to `host.test`, `8080` and
`/`. The command sends a GET request and prints `response:` and then the
parsed response. If a `SabaError` stops the request, it prints `error:` and
then that error. The exit status is 0 either way.

The request line always puts a `/` in front of the path. So pass `index.html`
to request `/index.html`.

## Library use

### URLs

```python
from saba.url import Url

url = Url.parse("http://example.com:8888/index.html?a=123&b=456")
url.host        # "example.com"
url.port        # "8888"
url.path        # "index.html"
url.searchpart  # "a=123&b=456"
```

The port is kept as a string. If the URL gives no port, it is `"80"`. The
path does not include the leading `/`.

`Url.parse` raises `ValueError("Only HTTP scheme is supported.")` if the text
does not contain `http://`.

### Responses

```python
from saba.http import HttpResponse

res = HttpResponse.parse("HTTP/1.1 200 OK\nDate: xx xx xx\n\nbody message")
res.version                # "HTTP/1.1"
res.status_code            # 200
res.reason                 # "OK"
res.header_value("Date")   # "xx xx xx"
res.body                   # "body message"
res.headers                # (Header(name='Date', value='xx xx xx'),)
```

Parsing follows these rules:

- Leading whitespace is stripped and `\r\n` becomes `\n`.
- A status code that is not a number becomes 404.
- Header names and values are trimmed.
- `header_value` returns the first header whose name matches exactly. If no
  header has that name, it raises `KeyError`.

`HttpResponse.parse` raises errors in these cases:

- `NetworkError` when the text has no line break after the status line.
- `UnexpectedInputError` when the status line has fewer than three parts.
- `UnexpectedInputError` when a header line has no `:`.

### Fetching

```python
from saba.client import HttpClient, build_request

response = HttpClient().get("example.com", 80, "index.html")
build_request("example.com", "index.html")  # the request text that is sent
```

`HttpClient` takes an optional `timeout` in seconds for the connection. The
request asks for `text/html` with `Connection: close`. The client reads until
the server closes the connection. It then decodes the reply as UTF-8 and parses
it.

Any failure in one of these steps raises `saba.errors.NetworkError`:

- resolving the host
- connecting
- sending
- receiving
- decoding

### Errors

All of these are defined in `saba.errors` and derive from `SabaError`:

- `NetworkError`
- `UnexpectedInputError`
- `InvalidUIError`
- `OtherError`

Each one carries its text in `message`. Errors compare equal when their type
and message are the same.

## What it does not do

saba fetches a single response and parses it. It does not do any of the
following:

- render HTML
- follow redirects
- decode chunked transfer encoding
- keep cookies or connections
- support HTTPS

## Development

```
pip install -e ".[test]"
pytest
```