from seo_analyzer.features.seo_analysis.schemas.analysis import MetadataRecord, ScoreBreakdown


class ScoringService:
    """
    Deterministic 0-100 score split into three bands:
      basic     (max 40) title, description, h1
      social    (max 30) open graph title/description/image
      technical (max 30) canonical, lang, viewport, charset, indexability
    Every rule is a presence check; length guidance is left to the client.
    """

    # Basic SEO
    TITLE_POINTS = 15
    DESCRIPTION_POINTS = 15
    H1_POINTS = 10

    # Social
    SOCIAL_TITLE_POINTS = 8
    SOCIAL_DESCRIPTION_POINTS = 8
    SOCIAL_IMAGE_POINTS = 14

    # Technical
    CANONICAL_POINTS = 10
    LANG_POINTS = 5
    VIEWPORT_POINTS = 5
    CHARSET_POINTS = 5
    INDEXABLE_POINTS = 5

    NOINDEX_DIRECTIVE = "noindex"

    @staticmethod
    def score_basic(record: MetadataRecord) -> int:
        score = 0
        if record.title:
            score += ScoringService.TITLE_POINTS
        if record.description:
            score += ScoringService.DESCRIPTION_POINTS
        if record.h1:
            score += ScoringService.H1_POINTS
        return score

    @staticmethod
    def score_social(record: MetadataRecord) -> int:
        score = 0
        # plain title/description stand in for missing og: tags
        if record.og_title or record.title:
            score += ScoringService.SOCIAL_TITLE_POINTS
        if record.og_description or record.description:
            score += ScoringService.SOCIAL_DESCRIPTION_POINTS
        if record.og_image:
            score += ScoringService.SOCIAL_IMAGE_POINTS
        return score

    @staticmethod
    def score_technical(record: MetadataRecord) -> int:
        score = 0
        if record.canonical:
            score += ScoringService.CANONICAL_POINTS
        if record.lang:
            score += ScoringService.LANG_POINTS
        if record.viewport:
            score += ScoringService.VIEWPORT_POINTS
        if record.charset:
            score += ScoringService.CHARSET_POINTS
        if ScoringService.NOINDEX_DIRECTIVE not in record.meta_robots:
            score += ScoringService.INDEXABLE_POINTS
        return score

    @staticmethod
    def score(record: MetadataRecord) -> ScoreBreakdown:
        basic = ScoringService.score_basic(record)
        social = ScoringService.score_social(record)
        technical = ScoringService.score_technical(record)

        return ScoreBreakdown(
            total=basic + social + technical,
            basic=basic,
            social=social,
            technical=technical,
        )
