from localebuild.assets import localize_assets


class TestLocalizeAssets:
    def test_no_assets(self):
        assert localize_assets(None, ["en", "es"]) == {}
        assert localize_assets({}, ["en", "es"]) == {}

    def test_missing_language_gets_english(self):
        assets = {"en": {"img.hero": "/en/hero.png"}}
        result = localize_assets(assets, ["en", "es"])
        assert result["es"] == {"img.hero": "/en/hero.png"}

    def test_override_per_key(self):
        assets = {
            "en": {"img.hero": "/en/hero.png", "img.logo": "/en/logo.png"},
            "es": {"img.hero": "/es/hero.png"},
        }
        result = localize_assets(assets, ["en", "es"])
        assert result["es"] == {"img.hero": "/es/hero.png", "img.logo": "/en/logo.png"}
        assert result["en"] == assets["en"]

    def test_only_supported_languages(self):
        assets = {"en": {"k": "/en"}, "xx": {"k": "/xx"}}
        assert set(localize_assets(assets, ["en"])) == {"en"}

    def test_input_not_mutated(self):
        assets = {"en": {"k": "/en", "j": "/en-j"}, "es": {"k": "/es"}}
        localize_assets(assets, ["en", "es"])
        assert assets["es"] == {"k": "/es"}
