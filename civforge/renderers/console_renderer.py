"""Plain-text formatting of units, civilizations and attack results.

Every function returns lines instead of printing so callers decide where the
text goes.
"""
from ..core.data import ArmySummary, UnitStats
from ..game.civilization import AttackResult, CivilizationInfo

HEADER_WIDTH = 60


def format_header(title: str, width: int = HEADER_WIDTH) -> list[str]:
    """Centered title between two double rules."""
    padding = max(0, (width - len(title) - 2) // 2)
    return [
        "",
        "═" * width,
        " " * padding + title,
        "═" * width,
    ]


def format_unit_line(stats: UnitStats) -> str:
    return stats.description


def format_army_summary(summary: ArmySummary) -> str:
    return (
        f"Total: {summary.unit_count} tropas, ataque {summary.total_attack}, "
        f"defesa {summary.total_defense}, custo {summary.total_gold_cost} ouro, "
        f"{summary.total_wood_cost} madeira"
    )


def format_unit_card(stats: UnitStats) -> list[str]:
    """Multi-line profile of an (optionally upgraded) unit."""
    return [
        f"TROPA: {stats.description}",
        f"Ataque: {stats.attack}",
        f"Defesa: {stats.defense}",
        f"Custo: {stats.gold_cost}",
    ]


def format_civilization_info(info: CivilizationInfo) -> list[str]:
    return [
        f"CIVILIZAÇÃO: {info.name}",
        f"Poder Militar: {info.military_power}",
        f"Recursos: {info.resources}",
        f"Estratégia: {info.strategy_name}",
        f"Modificador Ataque: {info.attack_modifier_percent}%",
        f"Modificador Defesa: {info.defense_modifier_percent}%",
    ]


def format_attack_result(civilization_name: str, result: AttackResult) -> list[str]:
    if not result.succeeded:
        return [result.message]
    return [
        f"{civilization_name} -> {result.narrative}",
        f" Recursos restantes: {result.remaining_resources}",
    ]
