"""Order models."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Size(str, Enum):
    """Canonical item sizes, in tie-break order."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ModificationType(str, Enum):
    """Kinds of modification instructions."""

    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"


class Intent(str, Enum):
    """Coarse intent of a single utterance."""

    GREETING = "greeting"
    ORDER = "order"
    CONFIRM = "confirm"
    DENY = "deny"
    QUANTITY = "quantity"
    COMPLETE = "complete"
    UNKNOWN = "unknown"


class ParsedOrderItem(BaseModel):
    """An item extracted from a transcript, optionally matched to the menu."""

    model_config = ConfigDict(frozen=True)

    raw_name: str
    canonical_name: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    size: Optional[Size] = None
    modifiers: List[str] = []  # Not filled by parsing; see OrderModification.target_index
    matched: bool = False
    confidence: float = Field(default=0.0, ge=0, le=1)
    position: Optional[int] = Field(
        default=None, description="Token index where the item starts"
    )

    @model_validator(mode="after")
    def _check_match_state(self) -> "ParsedOrderItem":
        if not self.matched and (self.confidence != 0 or self.canonical_name is not None):
            raise ValueError("unmatched items carry no confidence or canonical name")
        return self


class OrderModification(BaseModel):
    """An add/remove/change instruction found in a transcript."""

    model_config = ConfigDict(frozen=True)

    type: ModificationType
    target_item: str = "current"
    modifier_phrase: str
    position: Optional[int] = Field(
        default=None, description="Token index of the modification keyword"
    )
    target_index: Optional[int] = Field(
        default=None, description="Index into ParsedOrder.items, set by binding"
    )


class ParsedOrder(BaseModel):
    """Parsed order structure."""

    model_config = ConfigDict(frozen=True)

    items: List[ParsedOrderItem] = []
    modifications: List[OrderModification] = []
    special_requests: List[str] = []
    intent: Intent = Intent.UNKNOWN
    normalized_text: str = ""
