"""Shopping list generation."""

from recipex.services.shopping.service import ShoppingListService


__all__ = ["ShoppingListService"]
