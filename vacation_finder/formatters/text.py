from typing import Dict, Optional

from vacation_finder.types import (
    RankedOption,
    Recommendation,
    RoundTripOption,
    Season,
    VacationResults,
)
from vacation_finder.utils.dates import format_date


RECOMMENDATION_TEXT: Dict[str, Dict[Recommendation, str]] = {
    "es": {
        Recommendation.BEST: "🥇 Best Option! 💰 Great Savings! 🏖️ Perfect for relajarse 👥 Family-friendly",
        Recommendation.LONG_STAY: "⏳ ¡Vacaciones largas! Ideal para desconectar",
        Recommendation.STANDARD: "💰 Great Savings! 👥 Family-friendly",
    },
    "en": {
        Recommendation.BEST: "🥇 Best Option! 💰 Great Savings! 🏖️ Perfect to relax 👥 Family-friendly",
        Recommendation.LONG_STAY: "⏳ Long vacation! Ideal to unplug",
        Recommendation.STANDARD: "💰 Great Savings! 👥 Family-friendly",
    },
}

SEASON_TEXT: Dict[str, Dict[Season, str]] = {
    "es": {
        Season.SUMMER: "Verano ☀️",
        Season.AUTUMN: "Otoño 🍂",
        Season.WINTER: "Invierno ❄️",
        Season.SPRING: "Primavera 🌸",
    },
    "en": {
        Season.SUMMER: "Summer ☀️",
        Season.AUTUMN: "Autumn 🍂",
        Season.WINTER: "Winter ❄️",
        Season.SPRING: "Spring 🌸",
    },
}


def _table(tables: dict, locale: str) -> dict:
    return tables.get(locale, tables["es"])


def format_amount(value: float) -> str:
    """800.0 -> '800', 550.5 -> '550.5'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def describe_recommendation(rec: Recommendation, locale: str = "es") -> str:
    return _table(RECOMMENDATION_TEXT, locale)[rec]


def describe_season(season: Season, locale: str = "es") -> str:
    return _table(SEASON_TEXT, locale)[season]


def format_search_message(count: int, budget: float, locale: str = "es") -> str:
    b = format_amount(budget)
    if locale == "en":
        if count == 1:
            return f"🎉 Found 1 option within your budget of ${b}!"
        if count:
            return f"🎉 Found {count} options within your budget of ${b}!"
        return f"😔 No options within your budget of ${b}."
    if count:
        return f"🎉 Encontramos {count} opciones dentro de tu presupuesto de ${b}!"
    return f"😔 No hay opciones dentro de tu presupuesto de ${b}."


def format_cheapest(option: RoundTripOption, budget: float, locale: str = "es") -> str:
    total = format_amount(option.total_price)
    saved = format_amount(budget - option.total_price)
    if locale == "en":
        return f"💰 Cheapest: {option.destination} ${total} (you save ${saved})"
    return f"💰 Más barata: {option.destination} ${total} (ahorro ${saved})"


def format_longest(option: RoundTripOption, locale: str = "es") -> str:
    if locale == "en":
        return f"⏰ Longest: {option.destination} {option.stay_duration} days"
    return f"⏰ Más larga: {option.destination} {option.stay_duration} días"


def format_option_line(op: RankedOption, locale: str = "es") -> str:
    dep = format_date(op.outbound.date, locale)
    ret = format_date(op.return_flight.date, locale)
    return (f"• {op.destination} | {dep} → {ret} | {op.stay_duration}d | "
            f"${format_amount(op.total_price)} | {describe_season(op.season_info, locale)}")


def format_reply(results: VacationResults, locale: Optional[str] = None) -> str:
    """Plain-text digest of a search, one bullet per recommendation."""
    locale = locale or results.locale
    summary = results.summary
    if not results.recommendations:
        return summary.message

    parts = [summary.message, ""]
    for op in results.recommendations:
        parts.append(format_option_line(op, locale))
        parts.append(f"  {describe_recommendation(op.recommendation, locale)}")

    parts.append("")
    if summary.cheapest:
        parts.append(summary.cheapest)
    if summary.longest:
        parts.append(summary.longest)
    family = "Family options" if locale == "en" else "Opciones familiares"
    parts.append(f"👥 {family}: {summary.family_options}")
    return "\n".join(parts)
