from pydantic import BaseModel, ConfigDict, RootModel


class Route(BaseModel):
    """One entry of the application's ``routes.json``."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    view: str | None = None
    redirect: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect is not None


class Language(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class AssetTable(RootModel[dict[str, dict[str, str]]]):
    """A view's ``l10n-static.json``: language code -> asset key -> URL."""
