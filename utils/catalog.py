from flask import current_app

from models.model_registry import Brand, ModelEntry
from utils.seed import DEFAULT_COLOR, predefined_brands, predefined_models


class ModelCatalog:
    """
    Model and brand lookups for one application.

    Rows from the registry tables win over the predefined list. The cache
    loads on first use and must be invalidated after any model or brand
    mutation; ``get_catalog()`` returns the app's instance.
    """

    def __init__(self):
        self._models = None
        self._brands = None

    @property
    def loaded(self) -> bool:
        return self._models is not None

    def refresh(self):
        models = {m["key"]: m for m in predefined_models()}
        brands = {b["key"]: b for b in predefined_brands()}

        for b in Brand.query.all():
            brands[b.key] = {"key": b.key, "name": b.name, "logo_filename": b.logo_filename}
        for m in ModelEntry.query.all():
            models[m.key] = {
                "key": m.key,
                "name": m.name,
                "brand_key": m.brand_key or m.key,
                "logo_filename": m.logo_filename,
                "color": m.color or DEFAULT_COLOR,
            }

        self._models = models
        self._brands = brands

    def invalidate(self):
        self._models = None
        self._brands = None

    def _ensure_loaded(self):
        if not self.loaded:
            self.refresh()

    def model(self, key: str):
        self._ensure_loaded()
        return self._models.get(key)

    def brand(self, key: str):
        self._ensure_loaded()
        return self._brands.get(key)

    def model_name(self, key: str) -> str:
        model = self.model(key)
        return model["name"] if model else key

    def logo_for(self, key: str) -> str:
        model = self.model(key)
        if model:
            return model["logo_filename"]
        brand = self.brand(key)
        if brand:
            return brand["logo_filename"]
        return f"{key}.svg"


def init_catalog(app):
    app.extensions["model_catalog"] = ModelCatalog()


def get_catalog() -> ModelCatalog:
    return current_app.extensions["model_catalog"]
