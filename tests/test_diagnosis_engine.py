"""Tests del motor de diagnóstico."""

import itertools

import pytest

from navi.diagnostics import (
    AssetProfile,
    DiagnosisEngine,
    DiagnosisInput,
    IndustryNotFoundError,
    diagnose,
)
from navi.diagnostics.recommender import ASSET_TIPS, CLOSING_TIPS

from .factories import category, industry, pattern


ALL_ASSET_PROFILES = [
    AssetProfile(has_real_estate=r, has_ec_web=e, has_technology=t)
    for r, e, t in itertools.product([False, True], repeat=3)
]


def pattern_ids(result):
    return [p.id for p in result.recommended_patterns]


class TestIndustryResolution:
    """Resolución del sector."""

    @pytest.mark.parametrize("assets", ALL_ASSET_PROFILES)
    def test_unknown_industry_fails_for_every_asset_profile(self, restaurant_catalogs, assets):
        with pytest.raises(IndustryNotFoundError) as exc_info:
            diagnose(DiagnosisInput("unknown", assets=assets), restaurant_catalogs)
        assert exc_info.value.industry_id == "unknown"

    def test_not_found_is_a_lookup_error(self, restaurant_catalogs):
        with pytest.raises(LookupError):
            diagnose(DiagnosisInput("nope"), restaurant_catalogs)

    def test_industry_and_risks_come_from_catalog(self, restaurant_catalogs):
        result = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs)
        assert result.industry.id == "restaurant"
        assert result.risks == ("Risk A",)

    def test_business_description_does_not_change_result(self, restaurant_catalogs):
        plain = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs)
        described = diagnose(
            DiagnosisInput("restaurant", business_description="駅前で和食店を経営"),
            restaurant_catalogs
        )
        assert plain == described


class TestCategories:
    """Selección y orden de categorías."""

    def test_exactly_the_recommended_categories(self, restaurant_catalogs):
        result = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs)
        assert {c.id for c in result.recommended_categories} == {"growth", "recovery", "wage"}

    def test_sorted_by_adoption_rate_descending(self, restaurant_catalogs):
        result = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs)
        rates = [c.adoption_rate for c in result.recommended_categories]
        assert rates == sorted(rates, reverse=True)
        assert [c.id for c in result.recommended_categories] == ["wage", "recovery", "growth"]

    def test_equal_rates_keep_catalog_order(self, make_catalogs):
        catalogs = make_catalogs(
            [industry("i", ["b", "a", "c"])],
            [category("a", 50), category("b", 50), category("c", 60)],
            [pattern("p", ["i"], "EC販売")],
        )
        result = diagnose(DiagnosisInput("i"), catalogs)
        assert [c.id for c in result.recommended_categories] == ["c", "a", "b"]

    def test_assets_do_not_affect_categories(self, restaurant_catalogs):
        expected = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs).recommended_categories
        for assets in ALL_ASSET_PROFILES:
            result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
            assert result.recommended_categories == expected


class TestPatterns:
    """Puntuación, orden y truncado de patrones."""

    def test_only_patterns_for_the_industry(self, restaurant_catalogs):
        for assets in ALL_ASSET_PROFILES:
            result = diagnose(DiagnosisInput("retail", assets=assets), restaurant_catalogs)
            assert set(pattern_ids(result)) == {"school", "retail-only"}
            assert all(p.applies_to("retail") for p in result.recommended_patterns)

    def test_truncated_to_five(self, restaurant_catalogs):
        for assets in ALL_ASSET_PROFILES:
            result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
            assert len(result.recommended_patterns) == 5

    def test_band_order_without_assets(self, restaurant_catalogs):
        result = diagnose(DiagnosisInput("restaurant"), restaurant_catalogs)
        assert pattern_ids(result) == ["catering", "factory", "ec", "minpaku", "rental"]

    def test_real_estate_promotes_rental_patterns(self, restaurant_catalogs):
        assets = AssetProfile(has_real_estate=True)
        result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
        # rental y factory empatan a 2: rental va antes en el catálogo
        assert pattern_ids(result) == ["catering", "minpaku", "rental", "factory", "ec"]

    def test_ec_web_promotes_online_patterns(self, restaurant_catalogs):
        assets = AssetProfile(has_ec_web=True)
        result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
        # ec y catering empatan a 3, factory y school a 2: orden del catálogo
        assert pattern_ids(result) == ["ec", "catering", "factory", "school", "minpaku"]

    def test_ties_keep_catalog_order(self, make_catalogs):
        catalogs = make_catalogs(
            [industry("i", ["c"])],
            [category("c", 50)],
            [pattern(f"p{n}", ["i"], "EC販売", band="中") for n in range(7)],
        )
        result = diagnose(DiagnosisInput("i"), catalogs)
        assert pattern_ids(result) == ["p0", "p1", "p2", "p3", "p4"]

    def test_asset_monotonicity(self, restaurant_catalogs):
        """Activar un activo nunca baja a un patrón que lo usa."""
        engine = DiagnosisEngine(restaurant_catalogs)
        flags = ("has_real_estate", "has_ec_web", "has_technology")

        for assets in ALL_ASSET_PROFILES:
            for flag in flags:
                if getattr(assets, flag):
                    continue
                enabled = AssetProfile(**{**assets.__dict__, flag: True})
                before = [p.id for p in engine.select_patterns("restaurant", assets)]
                after = [p.id for p in engine.select_patterns("restaurant", enabled)]
                tag = next(iter(enabled.enabled_tags - assets.enabled_tags))

                for p in restaurant_catalogs.patterns:
                    if not (p.applies_to("restaurant") and p.uses(tag)) or p.id not in before:
                        continue
                    assert p.id in after
                    assert after.index(p.id) <= before.index(p.id)

    def test_unknown_band_scores_zero(self, make_catalogs):
        catalogs = make_catalogs(
            [industry("i", ["c"])],
            [category("c", 50)],
            [
                pattern("weird", ["i"], "EC販売", band="不明"),
                pattern("low", ["i"], "EC販売", band="低"),
                pattern("mid", ["i"], "EC販売", band="中"),
            ],
        )
        result = diagnose(DiagnosisInput("i"), catalogs)
        assert pattern_ids(result) == ["mid", "weird", "low"]

    def test_custom_limit(self, restaurant_catalogs):
        engine = DiagnosisEngine(restaurant_catalogs, max_patterns=2)
        result = engine.diagnose(DiagnosisInput("restaurant"))
        assert pattern_ids(result) == ["catering", "factory"]


class TestTips:
    """Composición de los consejos."""

    def test_tip_composition_with_real_estate(self, restaurant_catalogs):
        assets = AssetProfile(has_real_estate=True)
        result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
        assert result.tips == (
            "Tip A",
            "不動産・遊休資産の活用は採択率が高い傾向にあります",
            "申請額は1,500〜3,000万円が採択されやすい傾向にあります",
            "地方銀行を認定支援機関にすると採択率が約56%に上がります",
        )

    def test_asset_tips_follow_fixed_order(self, restaurant_catalogs):
        assets = AssetProfile(has_real_estate=True, has_ec_web=True, has_technology=True)
        result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
        assert result.tips == ("Tip A", *[tip for _, tip in ASSET_TIPS], *CLOSING_TIPS)

    @pytest.mark.parametrize("assets", ALL_ASSET_PROFILES)
    def test_tip_count(self, restaurant_catalogs, assets):
        result = diagnose(DiagnosisInput("restaurant", assets=assets), restaurant_catalogs)
        enabled = len(assets.enabled_tags)
        assert len(result.tips) == 1 + enabled + 2
        assert result.tips[-2:] == CLOSING_TIPS


class TestDiagnosis:
    """Propiedades globales del diagnóstico."""

    def test_deterministic(self, restaurant_catalogs):
        for assets in ALL_ASSET_PROFILES:
            diagnosis_input = DiagnosisInput("restaurant", assets=assets)
            assert diagnose(diagnosis_input, restaurant_catalogs) == diagnose(diagnosis_input, restaurant_catalogs)

    def test_izakaya_scenario(self, izakaya_catalogs):
        result = diagnose(DiagnosisInput("izakaya"), izakaya_catalogs)

        assert [c.id for c in result.recommended_categories] == ["catA", "catB"]
        assert pattern_ids(result) == ["p1"]
        assert result.tips == ("t1", *CLOSING_TIPS)
        assert result.risks == ("r1",)

    def test_to_dict_is_json_friendly(self, izakaya_catalogs):
        data = diagnose(DiagnosisInput("izakaya"), izakaya_catalogs).to_dict()

        assert data["industry"]["name"] == "居酒屋"
        assert [c["id"] for c in data["recommended_categories"]] == ["catA", "catB"]
        first = data["recommended_patterns"][0]
        assert first["difficulty"] == "中"
        assert first["adoption_rate_band"] == "高"
        assert isinstance(first["asset_tags"], list)
        assert data["tips"][0] == "t1"

    def test_shipped_catalogs_diagnose_every_industry(self, shipped_catalogs):
        engine = DiagnosisEngine(shipped_catalogs)
        for industry_id in shipped_catalogs.industry_ids():
            for assets in ALL_ASSET_PROFILES:
                result = engine.diagnose(DiagnosisInput(industry_id, assets=assets))
                assert 0 < len(result.recommended_patterns) <= 5
                assert result.recommended_categories
