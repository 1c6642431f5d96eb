"""
Shop catalog DTOs for Footy Career.
The catalog itself is static (SHOP_ITEMS in constants); these wrap each entry.
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional

from .constants import ATTRIBUTES, EFFECT_ATTRIBUTE_BOOST, EFFECT_KINDS, SHOP_ITEMS
from .errors import ValidationError


@dataclass(frozen=True)
class ItemEffect:
    kind: str
    value: int = 0
    attribute: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in EFFECT_KINDS:
            raise ValidationError(f"Unknown effect kind {self.kind!r}")
        if self.kind == EFFECT_ATTRIBUTE_BOOST and self.attribute not in ATTRIBUTES:
            raise ValidationError("ATTRIBUTE_BOOST needs a valid target attribute")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"kind": self.kind, "value": self.value}
        if self.attribute is not None:
            d["attribute"] = self.attribute
        return d


@dataclass(frozen=True)
class ShopItem:
    id: str
    name: str
    category: str
    price: int
    effect: ItemEffect
    one_time: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "effect": self.effect.to_dict(),
            "one_time": self.one_time,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShopItem":
        return cls(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            price=data["price"],
            effect=ItemEffect(data["effect"], data.get("value", 0), data.get("attribute")),
            one_time=bool(data.get("one_time", False)),
        )


CATALOG: Dict[str, ShopItem] = {item["id"]: ShopItem.from_dict(item) for item in SHOP_ITEMS}
