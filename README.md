# pokecache

An in-memory cache of Pokemon records with a fixed capacity, served over
HTTP as a plain WSGI application. When the cache is full, adding a new
Pokemon evicts the one that was added earliest.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Running the server

```
pokecache
```

This starts a threaded HTTP server on port 8080, on all interfaces, with a
cache that holds at most four Pokemon. Options:

| Option            | Default | Meaning                  |
|-------------------|---------|--------------------------|
| `--host`          | all     | address to bind          |
| `--port`          | `8080`  | port to listen on        |
| `--max-entries`   | `4`     | capacity of the cache    |

The same command is available as `python -m pokecache.app`. Requests are
logged through the `logging` module at INFO level; stop the server with
Ctrl-C.

## HTTP interface

| Method   | Path           | Result                                                                      |
|----------|----------------|-----------------------------------------------------------------------------|
| `GET`    | `/id/{id}`     | The Pokemon as JSON, `404` if absent, `400` if the id is not an unsigned 32-bit number |
| `GET`    | `/name/{name}` | The Pokemon as JSON, `404` if absent (names match exactly)                  |
| `POST`   | `/add`         | Adds the JSON body and answers `200`; `400` if it cannot be decoded, `500` on a duplicate id or name |
| `DELETE` | `/id/{id}`     | Removes the Pokemon and answers `200`; `400` for a bad id, `500` if absent  |

`HEAD` is accepted wherever `GET` is. A known path with the wrong method
answers `405` with an `Allow` header; any other path answers `404`. Paths
that are not in clean form (for example `/id//7` or `/a/../id/7`) are
redirected with `301` to their cleaned form.

A Pokemon looks like this:

```json
{
  "id": 12,
  "name": "Bulbasaur",
  "type": "Grass",
  "height": 123,
  "weight": 4567,
  "abilities": [
    {"name": "Jazz Dance", "description": "Dancey dance!", "generation": 12}
  ]
}
```

When decoding, field names match case-insensitively, and absent or `null`
fields keep their defaults (zero, empty string, no abilities, no type).
Types are read case-insensitively (`"grass"` and `"Grass"` are the same)
and must be one of the eighteen names returned by
`pokecache.models.pokemon_type_names()`; any other name is rejected with
`400`. A Pokemon without a type is written back with `"type": ""`.

## Using it from Python

```python
from pokecache.cache import PokemonCache
from pokecache.models import Pokemon, PokemonType

cache = PokemonCache(3)
cache.add(Pokemon(id=1, name="Alice", type=PokemonType.BUG, height=101, weight=201))
print(cache.get_by_id(1).name)   # Alice
print(len(cache))                # 1
```

- `PokemonCache.get_by_id` and `PokemonCache.get_by_name` return `None`
  when nothing is stored.
- `PokemonCache.add` raises `DuplicateIDError` or `DuplicateNameError` on a
  clash; `PokemonCache.delete` raises `NotFoundError` for an unknown id.
  All of these, and `InternalCacheError`, derive from `CacheError`.
- `pokecache.models.parse_pokemon_type` raises `InvalidPokemonTypeError`
  (a `ValueError`) for an unknown name.
- `Pokemon.from_dict` / `Pokemon.to_dict` convert to and from decoded JSON.

`pokecache.server.Server` is a WSGI callable, so it can be mounted in any
WSGI server; its `dispatch(method, path, body)` method routes a request
directly and returns a `Response`. `pokecache.app.build_http_server`
builds a server on the standard library's `wsgiref`.

## Limitations

- Everything is held in memory; nothing is saved when the server stops.
- Deleting a Pokemon does not remove it from the eviction order. Once the
  cache later fills up again, an add that would evict a deleted entry fails
  with `InternalCacheError` (over HTTP, `500`).