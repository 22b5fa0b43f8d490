"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import ArticleSettings, FeatureSettings, Settings
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_feature_settings(self, settings: Settings) -> FeatureSettings:
        """Provide feature switches."""
        return settings.features

    @provide(scope=Scope.APP)
    def provide_article_settings(self, settings: Settings) -> ArticleSettings:
        """Provide article listing settings."""
        return settings.articles
