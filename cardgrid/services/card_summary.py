"""Short text views of cards: one-line listings and collection summaries."""

from collections import Counter
from collections.abc import Sequence

from cardgrid.models.card import CardRecord, Rarity
from cardgrid.services.card_composer import render_card
from cardgrid.services.line_editor import RESET
from cardgrid.services.rarity_styles import (
    get_element_symbol,
    get_rarity_color,
    resolve_rarity,
)

SUMMARY_RULE = "═" * 59
TOP_CARD_COUNT = 3


def render_card_compact(card: CardRecord) -> str:
    """One coloured line: rarity, element, name, class and power."""
    color = get_rarity_color(card.rarity)
    rarity = card.rarity.upper().ljust(8)
    return (
        f"{color}[{rarity}] {get_element_symbol(card.element)} {card.agent_name} "
        f"({card.card_class}) - Power: {card.total_power()}{RESET}"
    )


def render_cards(cards: Sequence[CardRecord], art: str | None = None) -> str:
    """Render several full cards one after another, e.g. for a pack opening."""
    if not cards:
        return "No cards to display"
    if len(cards) == 1:
        return render_card(cards[0], art)

    parts = [f"Opening {len(cards)} cards:\n"]
    for index, card in enumerate(cards, start=1):
        parts.append(f"Card #{index}:\n{render_card(card, art)}\n")
    return "\n".join(parts)


def render_collection_summary(cards: Sequence[CardRecord]) -> str:
    """Totals, counts per rarity (highest first), and the strongest cards."""
    if not cards:
        return "Your collection is empty. Open some packs!"

    powers = [card.total_power() for card in cards]
    total_power = sum(powers)
    average_power = round(total_power / len(cards))

    lines = [
        SUMMARY_RULE,
        "  COLLECTION SUMMARY",
        f"  Total Cards: {len(cards)} | Total Power: {total_power}",
        f"  Avg Power: {average_power}",
        SUMMARY_RULE,
        "",
    ]

    counts = Counter(resolve_rarity(card.rarity) for card in cards)
    for rarity in reversed(Rarity):
        if counts[rarity]:
            color = get_rarity_color(rarity.value)
            lines.append(f"{color}  {rarity.value.upper():<10}: {counts[rarity]}{RESET}")

    ranked = sorted(zip(powers, range(len(cards))), key=lambda pair: (-pair[0], pair[1]))
    lines.append("")
    lines.append(f"  TOP {TOP_CARD_COUNT} CARDS BY POWER:")
    for place, (power, index) in enumerate(ranked[:TOP_CARD_COUNT], start=1):
        card = cards[index]
        lines.append(f"  {place}. {card.agent_name} ({card.rarity}) - {power}")

    return "\n".join(lines)
