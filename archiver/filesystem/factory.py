from archiver.config.settings import Settings
from archiver.filesystem.base import BaseTagStore
from archiver.filesystem.tags import InMemoryTagStore, XattrTagStore


class TagStoreFactory:
    """Creates the tag store configured in settings."""

    STORES: dict[str, type[BaseTagStore]] = {
        "memory": InMemoryTagStore,
        "xattr": XattrTagStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTagStore:
        name = settings.tag_store.lower()
        store_cls = cls.STORES.get(name)
        if store_cls is None:
            raise ValueError(
                f"Unknown tag store '{name}'. Choose from: {list(cls.STORES)}"
            )
        return store_cls()
