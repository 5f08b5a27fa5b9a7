"""Narrative generator — plain-English interpretation of calculation results.

Converts a raw ``CalculationResult`` into text that explains what each
publishing model demands of the creator and what it returns.
"""

from __future__ import annotations

from publishing_roi.config.rate_card import PublishingModel, RateCard
from publishing_roi.models.results import CalculationResult


def format_currency(amount: float) -> str:
    """USD with thousands separators and no cents, e.g. ``$107,000`` / ``-$36,000``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_number(value: float) -> str:
    return f"{value:,.0f}"


def _display_name(model: str, rate_card: RateCard | None) -> str:
    card = rate_card if rate_card is not None else RateCard.default()
    if model in card.models:
        return card.models[model].pricing.name  # type: ignore[index]
    return model


def model_story(
    result: CalculationResult,
    model: PublishingModel,
    rate_card: RateCard | None = None,
) -> str:
    """The "story behind the numbers" paragraph for one model."""
    r = result.for_model(model)
    card = rate_card if rate_card is not None else RateCard.default()

    if model == "trailguide":
        agency_visitors = result.results["agency"].visitors_needed if "agency" in result.results else None
        lines = ["TrailGuide Advantage"]
        lines.append(
            f"With our optimized publishing stack, you need only {format_number(r.visitors_needed)} monthly visitors"
            + (f" instead of {format_number(agency_visitors)} with traditional approaches." if agency_visitors else ".")
        )
        if "agency" in card.models:
            tg = card.models["trailguide"].rates
            ag = card.models["agency"].rates
            lines += [
                f"  • {tg.site_to_subscriber / ag.site_to_subscriber:.1f}x better site-to-subscriber conversion "
                f"({tg.site_to_subscriber * 100:.1f}% vs {ag.site_to_subscriber * 100:.0f}%)",
                f"  • {tg.email_to_subscriber / ag.email_to_subscriber:.1f}x better email-to-subscriber conversion "
                f"({tg.email_to_subscriber * 100:.0f}% vs {ag.email_to_subscriber * 100:.0f}%)",
                f"  • {tg.visitor_to_email / ag.visitor_to_email:.0f}x better visitor-to-email conversion "
                f"({tg.visitor_to_email * 100:.0f}% vs {ag.visitor_to_email * 100:.0f}%)",
            ]
        pricing = card.models["trailguide"].pricing
        lines.append(
            f"  • Only {format_currency(pricing.build_cost)} upfront + {pricing.revenue_share * 100:.0f}% revenue share"
        )
        return "\n".join(lines)

    if model == "agency":
        return "\n".join([
            "Agency Reality Check",
            f"Pay {format_currency(r.build_cost)} upfront and still fight uphill with standard "
            f"{r.conversion_rate:.0f}% conversion rates. You'll need {format_number(r.visitors_needed)} "
            "monthly visitors to hit your goal.",
            "  • High upfront investment with no conversion guarantees",
            "  • Standard conversion rates make growth expensive",
            "  • Ongoing maintenance costs without revenue sharing",
            "  • Long development cycles delay your launch",
        ])

    if model == "diy":
        multiple = ""
        if "trailguide" in result.results:
            ratio = r.visitors_needed / result.results["trailguide"].visitors_needed
            multiple = f" That's {ratio:.1f}x the traffic TrailGuide needs."
        return "\n".join([
            "DIY SaaS Trade-offs",
            f"Cheap to start at {format_currency(r.monthly_fees)}/month, but you'll need "
            f"{format_number(r.visitors_needed)} visitors monthly.{multiple}",
            "  • Low upfront costs but higher visitor requirements",
            f"  • Standard {r.conversion_rate:.0f}% conversion rates limit growth potential",
            "  • Monthly SaaS fees add up without revenue sharing alignment",
            "  • DIY means slower optimization and iteration",
        ])

    name = _display_name(model, card)
    return (
        f"{name}\nYou'll need {format_number(r.visitors_needed)} monthly visitors and an email list of "
        f"{format_number(r.email_list_needed)} to reach your goal."
    )


def generate_narrative(result: CalculationResult, rate_card: RateCard | None = None) -> str:
    """Generate a plain-English narrative from a calculation result.

    Returns a structured text block covering:
      1. Goal summary
      2. One block per publishing model
      3. Comparison verdict
      4. The story for the selected model
    """
    sections: list[str] = []

    # ── 1. Goal ──
    sections.append("=" * 60)
    sections.append("YOUR GOAL")
    sections.append("=" * 60)
    sections.append(
        f"Target paid subscribers: {format_number(result.target_subscribers)}\n"
        f"Monthly price: {format_currency(result.monthly_price)}/month\n"
        f"Current monthly visitors: {format_number(result.estimated_visitors)}\n"
        f"Target monthly revenue: {format_currency(result.target_monthly_revenue)}"
    )

    # ── 2. Per model ──
    for key, r in result.results.items():
        a = result.achievability[key]
        sections.append("")
        sections.append("=" * 60)
        sections.append(_display_name(key, rate_card).upper())
        sections.append("=" * 60)
        status = (
            "Achievable with current traffic"
            if a.achievable
            else f"Need {format_number(abs(a.visitor_gap))} more visitors"
        )
        sections.append(
            f"Visitors needed: {format_number(r.visitors_needed)} ({r.conversion_rate:.1f}% conversion)\n"
            f"Email list needed: {format_number(r.email_list_needed)} ({r.email_conversion_rate:.1f}% conversion)\n"
            f"Traffic coverage: {a.traffic_coverage_pct:.0f}% of needed traffic\n"
            f"Status: {status}\n"
            f"Build cost: {format_currency(r.build_cost)}\n"
            f"Monthly fees: {format_currency(r.monthly_fees)}\n"
            f"Monthly revenue: {format_currency(r.revenue)}\n"
            f"Annual net ROI: {format_currency(r.net_roi)}"
        )

    # ── 3. Comparison ──
    c = result.comparison
    sections.append("")
    sections.append("=" * 60)
    sections.append("COMPARISON")
    sections.append("=" * 60)
    best = result.results[c.best_roi_model]
    sections.append(
        f"Highest annual net ROI: {_display_name(c.best_roi_model, rate_card)} "
        f"({format_currency(best.net_roi)})"
    )
    fewest = result.results[c.fewest_visitors_model]
    sections.append(
        f"Fewest visitors needed: {_display_name(c.fewest_visitors_model, rate_card)} "
        f"({format_number(fewest.visitors_needed)})"
    )
    if c.traffic_multiple is not None:
        sections.append(
            f"TrailGuide reaches the goal with {c.traffic_multiple}x fewer visitors than traditional approaches."
        )

    # ── 4. Selected model story ──
    if result.selected_model in result.results:
        sections.append("")
        sections.append("=" * 60)
        sections.append("THE STORY BEHIND THE NUMBERS")
        sections.append("=" * 60)
        sections.append(model_story(result, result.selected_model, rate_card))

    return "\n".join(sections)
