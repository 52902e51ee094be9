# sbdb

A small library with no third-party dependencies for the Small-Body Database
(SBDB) Query API. It builds query strings from a typed filter, sends GET
requests with the standard library's `urllib`, and decodes the JSON response
into raw records and typed body descriptions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `sbdb.model`: the `Field` enumeration of SBDB field names, the helpers
  `identity_fields()`, `orbit_fields()`, `uncertainty_fields()`,
  `solution_fields()`, `nongrav_fields()` and `physical_fields()`, and the
  dataclasses `Body`, `Identity`, `Orbit`, `Uncertainty`, `Solution`,
  `Quality`, `NonGrav` and `Physical`. Every attribute of those dataclasses
  defaults to `None`.
- `sbdb.query`: `Filter`, `FieldSet`, the filter enumerations
  (`NumStatusFilter`, `KindFilter`, `GroupFilter`, `ClassFilter`,
  `Operator`), the constraint expressions (`And`, `Or`, `ComparisonExpr`)
  and the comparison helpers.
- `sbdb.client`: `Client`, `ClientError`, `HTTPStatusError` and the default
  `ENDPOINT`.
- `sbdb.decode`: `decode`, `Payload`, `Signature`, `Record`, `JsonNumber`
  and `DecodeError`.
- `sbdb.logger`: `set_logger` and `get_logger`.

## Building a query

```python
from sbdb.model import Field
from sbdb.query import And, FieldSet, Filter, KindFilter, df, eq

flt = Filter(
    fields=FieldSet(Field.SPK_ID, Field.FULL_NAME),
    limit=5,
    kind=KindFilter.ASTEROID,
    field_constraints=And(df("albedo"), eq("condition_code", "0")),
)
print(flt.values())   # dict of query parameters
print(flt.encode())   # URL-encoded query string, keys in sorted order
```

`FieldSet` accepts `Field` members or plain strings and always lists its
names in sorted order. `Filter.values()` raises `ValueError` when no field is
requested, when more than three orbit classes are given, or when `limit` or
`limit_from` is negative. Settings left at their defaults (`ANY`, `0`,
`False`, no classes, no constraints) are left out of the query.

The helpers `eq`, `ne`, `lt`, `gt`, `le`, `ge`, `rg`, `regex`, `df` and `nd`
return `ComparisonExpr` strings such as `field|EQ|value` or
`field|RG|min|max`. They can be nested in `And` and `Or`; `to_json()` renders
any expression as compact JSON, for example `{"AND":["albedo|DF"]}`.

## Sending a request

```python
from sbdb.client import Client

client = Client(timeout=30)
print(client.get_url(flt))
with client.get(flt) as response:
    raw = response.read()
```

`Client` sends requests to `sbdb.client.ENDPOINT` unless another `endpoint`
is given. An `opener` (a `urllib.request.OpenerDirector`) can be supplied in
place of the default one. `get_url` raises `ClientError` when the filter is
invalid or the endpoint cannot be parsed. `get` returns the open response,
which the caller closes. It raises `HTTPStatusError` (with `status` and
`body`) for a non-2xx answer, and `ClientError` when the request fails.

## Decoding a response

```python
import io
from sbdb.decode import decode

payload = decode(io.StringIO(
    '{"fields":["spkid","full_name","neo"],"data":[[1234,"(1234) Example","Y"]]}'
))
records = payload.records()      # list of Record (dict keyed by field name)
body = payload.bodies()[0]
print(body.identity.full_name)   # (1234) Example
print(body.identity.spk_id)      # 1234
print(body.identity.neo)         # True
```

`decode` reads a text or binary stream and raises `DecodeError` when the
stream is `None` or holds malformed JSON. `records()` and `bodies()` raise
`DecodeError` when a row's length differs from the number of fields.

Numbers in raw records stay `JsonNumber` strings, so no precision is lost
until a value is converted. `Record.get_float`, `get_int`, `get_string` and
`get_bool` do the conversions:

- `get_int` truncates non-integral numbers toward zero.
- `get_bool` accepts `true`/`false` and the flags `Y`/`T` and `N`/`F`.
- `get_string` strips whitespace from the full name.

A value that cannot be converted comes back as `None`, and a debug message
goes to the package logger. That logger is disabled until
`sbdb.logger.set_logger` is given a `logging.Logger`; passing `None` disables
it again.

## What it does not do

The package is a library only. It has no command-line tool, no
asynchronous client, and no retrying or caching of requests. It does not
store results anywhere: decoded bodies live only in memory.