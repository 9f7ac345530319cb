# hexstore

A small product catalogue organised as ports and adapters. The domain
(`hexstore.product`) and the service layer (`hexstore.service`) know nothing
about storage or transport; SQLite storage (`hexstore.db`), a command-line
adapter (`hexstore.cli_adapter`), a data-transfer object (`hexstore.dto`) and
a JSON HTTP API (`hexstore.web`) plug into them.

## Rules a product follows

- A `Product` has an `id` (a UUID4), a `name`, a `price` and a `status`,
  `ENABLED` or `DISABLED` (see `ProductStatus`). `new_product(name, price)`
  makes one with a fresh id and status `DISABLED`.
- `Product.enable()` works only when the price is greater than 0.
- `Product.disable()` works only when the price is exactly 0.
- `Product.is_valid()` turns an empty status into `DISABLED`, then rejects an
  unknown status, a negative price, an empty name, or an id that is missing or
  not a UUID4.

Every broken rule raises `hexstore.product.ProductError` (a `ValueError`).

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `hexstore` command keeps its data in `db.sqlite` in the current
directory, creating the `products` table when it is missing. Run without a
command, it prints its help.

Create a product:

```
hexstore cli --action create --name "Desk lamp" --price 25
```

Create a product and enable it, or create one and disable it (`disable` and
`disabled` are both accepted):

```
hexstore cli --action enable --name "Desk lamp" --price 25
hexstore cli --action disable --name "Free sample" --price 0
```

Any other action, including the default `enabled`, looks a product up by its
id:

```
hexstore cli --action get --id <product id>
```

The short options are `-a`, `-i`, `-n` and `-p`. When an action fails, its
error message is printed, followed by an empty line.

Start the HTTP API on port 9000, listening on all interfaces:

```
hexstore http
```

A configuration file may be given with `--config`; without it,
`.hexstore.yaml`, `.hexstore.yml` or `.hexstore.json` in the home directory is
read when present, and its path is reported on standard error. No setting in
it changes what the command does.

## HTTP API

`hexstore.web.ProductApp` is a WSGI application; `hexstore.web.serve(service,
host, port)` runs it with the standard library's WSGI server.

- `GET /product/{id}` returns the product as JSON, for example
  `{"ID":"...","Name":"Desk lamp","Price":25,"Status":"DISABLED"}`, or an
  empty 404 when it cannot be found.
- `POST /product` with a body such as `{"name": "Desk lamp", "price": 25}`
  creates a product from its name and price and returns it as JSON. Errors
  come back with status 500 and a body of the form `{"message":"..."}`
  (built by `json_error`).
- `OPTIONS` is accepted on both routes; other methods get 405, other paths 404.

## Using it from Python

```python
import sqlite3

from hexstore.db import ProductDb, create_schema
from hexstore.service import ProductService

connection = sqlite3.connect(":memory:")
create_schema(connection)
service = ProductService(ProductDb(connection))

lamp = service.create("Desk lamp", 25.0)
service.enable(lamp)
print(service.get(lamp.id).status)  # ENABLED
```

`ProductDb.get` raises `LookupError` for an unknown id. Any object with
`get` and `save` methods can stand in for `ProductDb` as the service's
storage (`ProductPersistence`).

`hexstore.cli_adapter.run(service, action, product_id, product_name,
product_price)` performs one command-line action and returns its message.
`hexstore.dto.ProductDTO.from_dict(data)` reads product fields from a decoded
JSON object, and `ProductDTO.bind(product)` copies them onto a `Product` and
validates it.

## What it does not do

There is no way to list, search or delete products, and no way to change a
product's name or price once it is stored. The HTTP API has no
authentication and no TLS.