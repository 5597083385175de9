"""
Pydantic Models - Catalog entries and cart summaries

Contains the validated, immutable records shared between the catalog and
the cart session:
- CatalogEntry: one priced, named catalog item
- CartLine / CartSummary: read-only view of a cart joined with the catalog
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# Catalog
# ============================================================

class CatalogEntry(BaseModel):
    """Price and display name for a single item id."""
    model_config = ConfigDict(frozen=True)

    item_id: int = Field(description="Item identifier")
    price: int = Field(description="Price in the smallest currency unit", ge=0)
    name: str = Field(description="Display name", min_length=1)


# ============================================================
# Cart summary
# ============================================================

class CartLine(BaseModel):
    """Cart line joined with its catalog price and name."""
    item_id: int = Field(description="Item identifier")
    name: str = Field(description="Display name, or the unknown-id sentinel")
    quantity: int = Field(description="Units in the cart", ge=1)
    unit_price: int = Field(description="Catalog price per unit", ge=0)
    line_total: int = Field(description="unit_price * quantity", ge=0)


class CartSummary(BaseModel):
    """
    Snapshot of a cart for display or total computation.

    Built by CartSession.get_cart_summary(); never mutated afterwards.
    """
    session_id: Optional[str] = Field(default=None, description="Owning session, if any")
    is_empty: bool = Field(default=True)
    total_items: int = Field(default=0, description="Sum of all quantities", ge=0)
    items: List[CartLine] = Field(default_factory=list)
    total: int = Field(default=0, description="Sum of all line totals", ge=0)
