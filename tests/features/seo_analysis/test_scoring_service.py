import pytest

from seo_analyzer.features.seo_analysis.schemas.analysis import MetadataRecord, ScoreBreakdown
from seo_analyzer.features.seo_analysis.services.scoring_service import ScoringService

URL = "https://x.com"

ALL_FIELDS = dict(
    title="Title",
    description="Description",
    keywords="a, b",
    h1="Heading",
    canonical="https://x.com/",
    lang="en",
    viewport="width=device-width",
    charset="utf-8",
    meta_robots="index, follow",
    og_title="OG title",
    og_description="OG description",
    og_image="https://x.com/og.png",
    og_type="website",
    twitter_card="summary",
    twitter_title="TW title",
    twitter_description="TW description",
    twitter_image="https://x.com/tw.png",
)

SCORED_FIELDS = [
    "title",
    "description",
    "h1",
    "canonical",
    "lang",
    "viewport",
    "charset",
    "og_title",
    "og_description",
    "og_image",
]


def record(**fields) -> MetadataRecord:
    return MetadataRecord(url=URL, **fields)


class TestScoringService:
    def test_fully_populated_record_scores_100(self):
        score = ScoringService.score(record(**ALL_FIELDS))
        assert score == ScoreBreakdown(total=100, basic=40, social=30, technical=30)

    def test_empty_record_only_earns_indexability(self):
        # an absent robots tag means the page is indexable
        score = ScoringService.score(record())
        assert score == ScoreBreakdown(total=5, basic=0, social=0, technical=5)

    def test_noindex_loses_indexability_points(self):
        score = ScoringService.score(record(**{**ALL_FIELDS, "meta_robots": "noindex, nofollow"}))
        assert score.technical == 25
        assert score.total == 95

    def test_noindex_match_is_a_substring_check(self):
        assert ScoringService.score(record(meta_robots="NOINDEX")).technical == 5
        assert ScoringService.score(record(meta_robots="all,noindex")).technical == 0

    def test_basic_band(self):
        assert ScoringService.score(record(title="t")).basic == 15
        assert ScoringService.score(record(description="d")).basic == 15
        assert ScoringService.score(record(h1="h")).basic == 10

    def test_social_falls_back_to_plain_title_and_description(self):
        score = ScoringService.score(record(title="t", description="d"))
        assert score.social == 16

    def test_social_counts_og_tags_without_plain_ones(self):
        score = ScoringService.score(record(og_title="t", og_description="d", og_image="i"))
        assert score.social == 30
        assert score.basic == 0

    def test_og_image_is_worth_14(self):
        assert ScoringService.score(record(og_image="i")).social == 14

    def test_technical_band(self):
        score = ScoringService.score(
            record(canonical="c", lang="en", viewport="v", charset="utf-8", meta_robots="index")
        )
        assert score.technical == 30

    def test_twitter_and_keywords_do_not_score(self):
        score = ScoringService.score(
            record(keywords="k", og_type="website", twitter_card="c", twitter_title="t",
                   twitter_description="d", twitter_image="i")
        )
        assert score == ScoringService.score(record())

    def test_length_does_not_matter(self):
        short = ScoringService.score(record(title="x"))
        long = ScoringService.score(record(title="x" * 500))
        assert short == long

    @pytest.mark.parametrize("present", [[], ["title"], ["og_image", "lang"], SCORED_FIELDS])
    def test_total_is_sum_of_bands(self, present):
        score = ScoringService.score(record(**{name: ALL_FIELDS[name] for name in present}))
        assert score.total == score.basic + score.social + score.technical
        assert 0 <= score.basic <= 40
        assert 0 <= score.social <= 30
        assert 0 <= score.technical <= 30

    @pytest.mark.parametrize("added", SCORED_FIELDS)
    def test_adding_a_field_never_lowers_a_band(self, added):
        base_fields = {name: ALL_FIELDS[name] for name in SCORED_FIELDS if name != added}
        for subset in ({}, base_fields):
            before = ScoringService.score(record(**subset))
            after = ScoringService.score(record(**{**subset, added: ALL_FIELDS[added]}))
            assert after.basic >= before.basic
            assert after.social >= before.social
            assert after.technical >= before.technical
            assert after.total >= before.total

    def test_score_is_deterministic(self):
        r = record(**ALL_FIELDS)
        assert ScoringService.score(r) == ScoringService.score(r)

    def test_breakdown_rejects_inconsistent_total(self):
        with pytest.raises(ValueError):
            ScoreBreakdown(total=10, basic=0, social=0, technical=5)
