"""Turn domain data into plain-text context for the model.

Catalog formatters are pure functions of ``(data, config)``: identical input
always yields the identical string.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from babel.dates import format_date
from babel.numbers import format_currency

from vibes.config import settings
from vibes.schemas.agent import ContextFormatterConfig, CurrencyConfig
from vibes.stores.calendar import CalendarStore

MENU_DEFAULTS = ContextFormatterConfig(
    instructions=[
        "YOU MUST FOLLOW THESE RULES STRICTLY:",
        "1. Only mention menu items that are listed below.",
        "2. All prices are in the listed currency only.",
        "3. If a guest asks for an item that is NOT on this list, politely tell them it is not available.",
    ],
    reminder=(
        "REMEMBER: If a guest asks for ANY item not listed above, say that it is not available."
    ),
    category_names={
        "appetizers": "APPETIZERS",
        "mains": "MAIN COURSES",
        "desserts": "DESSERTS",
        "drinks": "DRINKS",
    },
)

WELLNESS_DEFAULTS = ContextFormatterConfig(
    instructions=[
        "YOU MUST FOLLOW THESE RULES STRICTLY:",
        "1. Only mention wellness services that are listed below.",
        "2. All prices are in the listed currency only.",
        "3. If a guest asks for a service that is NOT on this list, politely tell them it is not available.",
    ],
    reminder=(
        "REMEMBER: If a guest asks for ANY service not listed above, say that it is not available."
    ),
    category_names={
        "massages": "MASSAGES",
        "treatments": "TREATMENTS",
        "packages": "PACKAGES",
        "facilities": "FACILITIES",
    },
)


def babel_locale(locale: str) -> str:
    return locale.replace("-", "_")


def format_price(amount: float, currency: CurrencyConfig) -> str:
    text = format_currency(amount, currency.code, locale=babel_locale(currency.locale))
    return text.replace("\xa0", " ").replace("\u202f", " ")


def _merge(config: ContextFormatterConfig | Mapping[str, Any] | None, defaults: ContextFormatterConfig) -> ContextFormatterConfig:
    if config is None:
        config = ContextFormatterConfig()
    elif not isinstance(config, ContextFormatterConfig):
        config = ContextFormatterConfig.model_validate(config)
    return ContextFormatterConfig(
        instructions=config.instructions if config.instructions is not None else defaults.instructions,
        reminder=config.reminder if config.reminder is not None else defaults.reminder,
        category_names=config.category_names or defaults.category_names,
        currency=config.currency
        or defaults.currency
        or CurrencyConfig(code=settings.default_currency, locale=settings.default_locale),
    )


def format_catalog_context(
    data: Mapping[str, Any] | None,
    config: ContextFormatterConfig,
    *,
    header: str,
    section_title: str,
    describe: Callable[[Mapping[str, Any]], str | None],
) -> str:
    if not data:
        return ""

    currency = config.currency or CurrencyConfig()
    lines = [header, "", *(config.instructions or []), "", section_title, ""]

    for category_key, category_name in (config.category_names or {}).items():
        items = data.get(category_key)
        if not items:
            continue
        lines.append(f"{category_name}:")
        for item in items:
            attribute = describe(item)
            suffix = f" ({attribute})" if attribute else ""
            lines.append(f"- {item['name']} - {format_price(item['price'], currency)}{suffix}")
        lines.append("")

    if config.reminder:
        lines.append(config.reminder)
    return "\n".join(lines)


def menu_context_string(
    data: Mapping[str, Any] | None,
    config: ContextFormatterConfig | Mapping[str, Any] | None = None,
) -> str:
    return format_catalog_context(
        data,
        _merge(config, MENU_DEFAULTS),
        header="[Menu Context - CRITICAL INSTRUCTIONS]",
        section_title="ACTUAL MENU ITEMS (ONLY THESE EXIST):",
        describe=lambda item: item.get("type"),
    )


def wellness_context_string(
    data: Mapping[str, Any] | None,
    config: ContextFormatterConfig | Mapping[str, Any] | None = None,
) -> str:
    return format_catalog_context(
        data,
        _merge(config, WELLNESS_DEFAULTS),
        header="[Wellness Context - CRITICAL INSTRUCTIONS]",
        section_title="ACTUAL WELLNESS SERVICES (ONLY THESE EXIST):",
        describe=lambda item: item.get("duration"),
    )


async def calendar_context_string(
    store: CalendarStore,
    *,
    now: datetime | None = None,
    locale: str | None = None,
) -> str:
    """Full calendar state plus the current date and time."""
    now = now or datetime.now(UTC)
    loc = babel_locale(locale or settings.default_locale)
    entries = await store.list()

    lines = [
        "CURRENT DATE AND TIME:",
        f"- Date: {format_date(now.date(), format='full', locale=loc)} ({now.date().isoformat()})",
        f"- Time: {now.strftime('%H:%M')}",
        "",
        "Current calendar state:",
        "",
        f"Total: {len(entries)} {'entry' if len(entries) == 1 else 'entries'}",
        "",
        "Entries:",
    ]
    for entry in entries:
        lines += [
            f"- ID: {entry.id}",
            f"  Title: {entry.title}",
            f"  Date: {format_date(entry.day, format='full', locale=loc)} ({entry.date})",
            f"  Time: {entry.time} - {entry.end_time} (Duration: {entry.duration} minutes)",
        ]
        if entry.description:
            lines.append(f"  Description: {entry.description}")
        lines.append("")
    return "\n".join(lines)
