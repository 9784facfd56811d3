import logging

from data_store import write_shops

logger = logging.getLogger(__name__)


class ShopsMixin:
    def has_shop(self, name):
        return name.strip() in self.shops

    def add_shop(self, name):
        name = str(name).strip()
        if not name or name in self.shops:
            return False

        self.shops.append(name)
        write_shops(self.shops, self.data_dir)
        logger.info("Added shop: %s", name)
        return True
