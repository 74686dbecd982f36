"""Command objects for the service layer.

Commands are detached, ORM-free snapshots of entities. Services accept
them as change requests and return them as read views, so callers never
hold live SQLAlchemy state outside a session.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Optional

from ..models.enums import Difficulty
from ..utils.constants import AMOUNT_DECIMAL_PLACES

AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)


def normalize_amount(value):
    """
    Convert an amount to a Decimal rounded to the stored scale.

    ints, floats and numeric strings are converted; values that are not
    finite numbers are returned unchanged so validation can reject them.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        return value
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        if not amount.is_finite():
            return value
        return amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return value


@dataclass(frozen=True)
class UnitOfMeasureCommand:
    """Unit of measure reference, usually carrying only the ID."""

    id: Optional[int] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CategoryCommand:
    """Category reference."""

    id: Optional[int] = None
    description: Optional[str] = None


@dataclass
class NotesCommand:
    """Recipe notes."""

    id: Optional[int] = None
    recipe_notes: Optional[str] = None


@dataclass
class IngredientCommand:
    """Ingredient change request and ingredient view.

    Attributes:
        id: Ingredient ID, None for an ingredient that is not persisted yet
        recipe_id: Owning recipe ID
        description: Ingredient text
        amount: Quantity (normalized to Decimal)
        uom: Unit of measure reference
    """

    id: Optional[int] = None
    recipe_id: Optional[int] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    uom: Optional[UnitOfMeasureCommand] = None

    def __post_init__(self) -> None:
        self.amount = normalize_amount(self.amount)


@dataclass
class RecipeCommand:
    """Recipe change request and recipe view."""

    id: Optional[int] = None
    description: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    source: Optional[str] = None
    url: Optional[str] = None
    directions: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    notes: Optional[NotesCommand] = None
    ingredients: List[IngredientCommand] = field(default_factory=list)
    categories: List[CategoryCommand] = field(default_factory=list)
