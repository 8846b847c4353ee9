"""Rule-based strategy recommendations.

No learning — every block is triggered by a fixed threshold and the rules
are independent, so several blocks usually fire together.

Rules, in output order:
    1. ROI            < 0 negative · 0–50 improvable · ≥ 50 strong
    2. Break-even     > 12 slow · 6–12 typical · < 6 excellent   (only if reached)
    3. Conversion     below the CRO threshold (default 1 %)
    4. Click-through  below the CTR threshold (default 10 %)     (only if supplied)
    5. Keywords       fewer than the coverage minimum (default 5) (only if supplied)
    6. Industry       one fixed block per industry type
    7. Maturity       new (< 1 000) · growing (< 5 000) · established
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from seo_roi.inputs import CalculatorInput, IndustryType
from seo_roi.settings import Settings, get_settings

__all__ = ["RecommendationBlock", "generate_recommendations", "site_maturity"]


@dataclass(frozen=True)
class RecommendationBlock:
    """One titled block of advice."""

    title: str
    description: str
    items: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "description": self.description, "items": list(self.items)}


# ── ROI ──────────────────────────────────────────────────────────────
_ROI_NEGATIVE = RecommendationBlock(
    "Your current SEO ROI is negative.",
    "Here are some ways to improve:",
    (
        "Focus on higher-converting keywords that align with your business goals",
        "Improve your website's conversion rate with better landing pages and user experience",
        "Reduce SEO costs by focusing on the most effective strategies",
        "Consider increasing your average order value through upselling or cross-selling",
        "Target keywords with lower difficulty to see faster results",
    ),
)
_ROI_IMPROVABLE = RecommendationBlock(
    "Your SEO ROI is positive but could be improved.",
    "Consider these strategies:",
    (
        "Target more high-intent keywords to attract users closer to making a purchase",
        "Optimize your highest-traffic pages for better conversion rates",
        "Implement A/B testing to identify what drives better results",
        "Focus on content that addresses the full customer journey",
        "Improve your internal linking structure to boost overall site authority",
    ),
)
_ROI_STRONG = RecommendationBlock(
    "Your SEO ROI is strong!",
    "To maintain and improve:",
    (
        "Continue expanding your keyword targeting to capture more market share",
        "Reinvest some of your profits into scaling successful SEO strategies",
        "Consider diversifying your traffic sources while maintaining your SEO advantage",
        "Create content clusters around your most profitable topics",
        "Implement advanced structured data to enhance SERP visibility",
    ),
)

# ── Break-even ───────────────────────────────────────────────────────
_BREAK_EVEN_SLOW = RecommendationBlock(
    "Your break-even point is longer than 12 months.",
    "To speed up your ROI:",
    (
        "Focus on quick-win keywords that can rank faster",
        "Optimize existing content that's already getting some traffic",
        "Consider adjusting your SEO budget allocation for better efficiency",
        "Target higher-converting, lower-volume keywords initially",
        "Implement conversion rate optimization tactics alongside SEO",
    ),
)
_BREAK_EVEN_TYPICAL = RecommendationBlock(
    "Your break-even point is between 6-12 months,",
    "which is typical for SEO campaigns. Keep optimizing to improve this timeline.",
    (
        "Continue your current strategy while monitoring performance",
        "Look for opportunities to accelerate results through featured snippets",
        "Consider adding complementary marketing channels to boost overall ROI",
    ),
)
_BREAK_EVEN_FAST = RecommendationBlock(
    "Your break-even point is less than 6 months,",
    "which is excellent for an SEO campaign!",
    (
        "Document your successful strategies for future campaigns",
        "Consider increasing investment to scale these results",
        "Look for ways to expand to related keyword areas",
    ),
)

# ── Secondary signals ────────────────────────────────────────────────
_LOW_CONVERSION = RecommendationBlock(
    "Your conversion rate is below average.",
    "Focus on conversion rate optimization (CRO):",
    (
        "Improve your call-to-action buttons and placement",
        "Streamline your checkout or lead capture process",
        "Add social proof and testimonials to build trust",
        "Ensure your site is mobile-friendly and loads quickly",
        "Segment your traffic and create targeted landing pages for different user intents",
        "Implement personalization based on user behavior and traffic source",
    ),
)
_LOW_CTR = RecommendationBlock(
    "Your click-through rate is below typical first-page results.",
    "To improve your position and CTR:",
    (
        "Optimize your meta titles and descriptions to be more compelling",
        "Target higher ranking positions (top 3) as they get 11-27.6% CTR",
        "Use schema markup to enhance your search results appearance",
        "Target featured snippets to increase visibility",
        "Improve your brand recognition to encourage more clicks",
    ),
)
_FEW_KEYWORDS = RecommendationBlock(
    "You're targeting relatively few keywords.",
    "Consider:",
    (
        "Expanding your content strategy to cover more relevant topics",
        "Creating topic clusters around your main keywords",
        "Targeting long-tail variations of your primary keywords",
        "Analyzing competitor keyword gaps to find new opportunities",
        "Using question-based keywords to capture featured snippets",
    ),
)

# ── Industry ─────────────────────────────────────────────────────────
_INDUSTRY: dict[IndustryType, RecommendationBlock] = {
    IndustryType.ECOMMERCE: RecommendationBlock(
        "E-commerce SEO Opportunities",
        "Specialized strategies for e-commerce sites:",
        (
            "Optimize product schema markup for enhanced product listings",
            "Create detailed buying guides and comparison content",
            "Implement faceted navigation optimizations",
            "Focus on seasonal keyword opportunities",
        ),
    ),
    IndustryType.SAAS: RecommendationBlock(
        "SaaS SEO Strategy",
        "Tailored approaches for SaaS companies:",
        (
            "Develop educational content targeting each stage of the buyer journey",
            "Create detailed product comparison pages",
            "Focus on problem-solution content",
            "Build authority through technical thought leadership",
        ),
    ),
    IndustryType.LOCAL: RecommendationBlock(
        "Local SEO Focus",
        "Strategies to improve local search visibility:",
        (
            "Optimize Google Business Profile with complete information",
            "Build local citations across relevant directories",
            "Implement local schema markup",
            "Develop content around local events and news",
        ),
    ),
    IndustryType.OTHER: RecommendationBlock(
        "General SEO Recommendations",
        "Core SEO strategies to implement:",
        (
            "Focus on creating high-quality, authoritative content",
            "Build relevant and authoritative backlinks",
            "Ensure technical SEO fundamentals are optimized",
            "Regularly audit and update existing content",
        ),
    ),
}

# ── Site maturity ────────────────────────────────────────────────────
NEW_SITE_MAX_TRAFFIC = 1_000
GROWING_SITE_MAX_TRAFFIC = 5_000

_MATURITY: dict[str, RecommendationBlock] = {
    "new": RecommendationBlock(
        "New Site Growth Expectations",
        "Sites with little organic traffic build authority slowly; most growth arrives late in the campaign:",
        (
            "Expect a quiet first few months while pages are indexed and trusted",
            "Prioritize long-tail keywords where established competitors are absent",
            "Publish consistently to build topical authority",
            "Earn a small number of relevant, high-quality backlinks early",
        ),
    ),
    "growing": RecommendationBlock(
        "Growing Site Momentum",
        "Your site has an established foothold and can compound its gains:",
        (
            "Refresh pages ranking on page two to push them onto page one",
            "Expand successful topics into content clusters",
            "Strengthen internal links toward your highest-converting pages",
            "Track rankings monthly to catch quick wins",
        ),
    ),
    "established": RecommendationBlock(
        "Established Site Strategy",
        "Your site's authority lets new content rank quickly:",
        (
            "Defend top rankings by keeping cornerstone content current",
            "Target competitive head terms your authority can now win",
            "Audit technical health at scale (crawl budget, index bloat)",
            "Use structured data to win richer search results",
        ),
    ),
}


def site_maturity(current_traffic: float) -> str:
    """``new`` / ``growing`` / ``established`` by current monthly traffic."""
    if current_traffic < NEW_SITE_MAX_TRAFFIC:
        return "new"
    if current_traffic < GROWING_SITE_MAX_TRAFFIC:
        return "growing"
    return "established"


def generate_recommendations(
    calc_input: CalculatorInput,
    roi_percent: float,
    break_even: float | None,
    *,
    settings: Settings | None = None,
) -> list[RecommendationBlock]:
    """Blocks triggered by the result and the input, in rule order."""
    settings = settings or get_settings()
    blocks: list[RecommendationBlock] = []

    # 1 ── ROI ──────────────────────────────────────────────────
    if roi_percent < 0:
        blocks.append(_ROI_NEGATIVE)
    elif roi_percent < 50:
        blocks.append(_ROI_IMPROVABLE)
    else:
        blocks.append(_ROI_STRONG)

    # 2 ── Break-even ───────────────────────────────────────────
    if break_even is not None:
        if break_even > 12:
            blocks.append(_BREAK_EVEN_SLOW)
        elif break_even >= 6:
            blocks.append(_BREAK_EVEN_TYPICAL)
        else:
            blocks.append(_BREAK_EVEN_FAST)

    # 3 ── Conversion rate ──────────────────────────────────────
    if (calc_input.conversion_rate or 0) < settings.low_conversion_rate_percent:
        blocks.append(_LOW_CONVERSION)

    # 4 ── Click-through rate ───────────────────────────────────
    if calc_input.organic_ctr is not None and calc_input.organic_ctr < settings.low_ctr_percent:
        blocks.append(_LOW_CTR)

    # 5 ── Keyword coverage ─────────────────────────────────────
    if calc_input.keyword_count is not None and calc_input.keyword_count < settings.min_keyword_count:
        blocks.append(_FEW_KEYWORDS)

    # 6 ── Industry ─────────────────────────────────────────────
    blocks.append(_INDUSTRY[calc_input.industry_type])

    # 7 ── Site maturity ────────────────────────────────────────
    blocks.append(_MATURITY[site_maturity(calc_input.current_traffic or 0)])

    return blocks
