from src.gifts.registry import GiftRegistry
from src.gifts.repository.store import SqlGiftStore


def get_gift_registry() -> GiftRegistry:
    """Dependency to get gift registry instance."""
    return GiftRegistry(store=SqlGiftStore())
