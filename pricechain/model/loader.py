import json
from pathlib import Path
from typing import Any

import yaml

from pricechain.errors import InvalidInputError
from pricechain.model.types import Cart, CartItem, Customer


def read_document(path: Path, *, error_cls: type = InvalidInputError) -> Any:
    """
    Read a YAML (.yaml/.yml) or JSON document.

    Unknown extensions are tried as JSON first, then YAML.
    """
    if not isinstance(path, Path):
        path = Path(path)

    if not path.exists():
        raise error_cls(f"File does not exist: {path}", code="file_not_found", source=str(path))
    if not path.is_file():
        raise error_cls(f"Path is not a file: {path}", code="path_not_file", source=str(path))

    raw = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            return json.loads(raw)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(raw)
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise error_cls(
            f"Failed to parse {path.name}",
            code="parse_error",
            source=str(path),
            details={"error": str(e)},
        ) from e


class DefaultCartLoader:
    """
    Loads a Cart from cart.yaml / cart.yml / cart.json:

        customer:
          email: user@example.com
          gold: true
        items:
          - name: Oil Filter
            price: 400
            qty: 1
    """

    def load(self, path: Path) -> Cart:
        if not isinstance(path, Path):
            path = Path(path)

        data = read_document(path)
        if not isinstance(data, dict):
            raise InvalidInputError("Cart root must be a mapping/object.", code="invalid_cart", source=str(path))

        return Cart(
            items=self._parse_items(data.get("items"), path),
            customer=self._parse_customer(data.get("customer"), path),
        )

    def _parse_customer(self, raw: Any, path: Path) -> Customer:
        if not isinstance(raw, dict):
            raise InvalidInputError("'customer' must be an object.", code="invalid_customer", source=str(path))

        # support "gold" or "is_gold"
        gold = raw.get("is_gold", raw.get("gold", False))
        if not isinstance(gold, bool):
            raise InvalidInputError("'customer.gold' must be a boolean.", code="invalid_customer", source=str(path))

        return Customer(email=str(raw.get("email") or ""), is_gold=gold)

    def _parse_items(self, raw: Any, path: Path) -> tuple[CartItem, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, list):
            raise InvalidInputError("'items' must be a list when present.", code="invalid_items", source=str(path))

        items: list[CartItem] = []
        for idx, spec in enumerate(raw):
            if not isinstance(spec, dict):
                raise InvalidInputError(
                    f"Item #{idx} must be an object.",
                    code="invalid_item",
                    source=str(path),
                )
            # support "qty" or "quantity"
            qty = spec.get("qty", spec.get("quantity", 1))
            items.append(CartItem(name=str(spec.get("name") or f"item-{idx}"), price=spec.get("price"), qty=qty))

        return tuple(items)
