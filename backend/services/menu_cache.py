from typing import Dict, List, Optional

from schemas import MenuItemResponse


class MenuCache:
    """Loaded menus keyed by restaurant id, invalidated on menu mutations.

    Every invalidation bumps the restaurant's version. A reader takes the
    version before loading and ``put`` drops the result if it has moved, so a
    load that raced with a mutation never lands in the cache.
    """

    def __init__(self) -> None:
        self._menus: Dict[int, List[MenuItemResponse]] = {}
        self._versions: Dict[int, int] = {}

    def version(self, restaurant_id: int) -> int:
        return self._versions.get(restaurant_id, 0)

    def get(self, restaurant_id: int) -> Optional[List[MenuItemResponse]]:
        menu = self._menus.get(restaurant_id)
        return list(menu) if menu is not None else None

    def put(self, restaurant_id: int, menu: List[MenuItemResponse], version: int) -> bool:
        if self.version(restaurant_id) != version:
            return False
        self._menus[restaurant_id] = list(menu)
        return True

    def invalidate(self, restaurant_id: int) -> None:
        self._versions[restaurant_id] = self.version(restaurant_id) + 1
        self._menus.pop(restaurant_id, None)

    def clear(self) -> None:
        self._menus.clear()
        self._versions.clear()


menu_cache = MenuCache()
