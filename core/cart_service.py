# core/cart_service.py
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional

from core.config import TAX_RATE
from core.errors import ValidationError

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a price (Decimal, float, int or str) to a 2-place Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass
class CartLine:
    """Snapshot of a menu item plus quantity. Identity is (item_id, instructions)."""
    item_id: str
    name: str
    price: Decimal
    quantity: int
    instructions: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def matches(self, item_id, instructions) -> bool:
        # None and "" are different instructions
        return self.item_id == item_id and self.instructions == instructions


class Cart:
    """
    In-memory shopping cart.

    Lines are kept in insertion order and addressed by position, the same
    way the cart screen lists them. Totals are derived on every read.
    """

    def __init__(self, notify: Callable[[str], None] = None, tax_rate: Decimal = TAX_RATE):
        self._lines: List[CartLine] = []
        self._notify = notify
        self.tax_rate = Decimal(str(tax_rate))

    # ===================== MUTATIONS =====================

    def add_to_cart(self, item, quantity: int = 1, instructions: str = None) -> CartLine:
        """Merge into the line with the same (id, instructions) or append a new one."""
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        line = next((l for l in self._lines if l.matches(item.id, instructions)), None)
        if line:
            line.quantity += quantity
        else:
            line = CartLine(
                item_id=item.id,
                name=item.name,
                price=to_money(item.price),
                quantity=quantity,
                instructions=instructions,
                image_url=getattr(item, "image_url", None),
                category=getattr(item, "category", None),
            )
            self._lines.append(line)

        logger.debug("Cart add: %s x%d (%r)", item.name, quantity, instructions)
        if self._notify:
            self._notify(f"{quantity} {item.name} added to cart")
        return line

    def remove_from_cart(self, index: int) -> None:
        """Delete the line at index. Out-of-range is a no-op."""
        self._lines = [l for i, l in enumerate(self._lines) if i != index]

    def update_quantity(self, index: int, delta: int) -> None:
        """Add delta to a line's quantity; the line is removed when it drops to zero or below."""
        if index < 0 or index >= len(self._lines):
            return
        line = self._lines[index]
        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            self.remove_from_cart(index)
            return
        line.quantity = new_quantity

    def clear(self) -> None:
        self._lines = []

    # ===================== DERIVED =====================

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(list(self._lines))

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        """Total units across all lines (badge count)."""
        return sum(l.quantity for l in self._lines)

    @property
    def subtotal(self) -> Decimal:
        return to_money(sum((l.line_total for l in self._lines), Decimal("0")))

    @property
    def tax(self) -> Decimal:
        return to_money(self.subtotal * self.tax_rate)

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax

    def checkout_summary(self):
        """Rows for the payment screen order summary."""
        return [
            {
                "quantity": l.quantity,
                "name": l.name,
                "note": l.instructions or "",
                "subtotal": to_money(l.line_total),
            }
            for l in self._lines
        ]
