#!/usr/bin/env python3
"""Command-line demonstrations of unit factories, upgrades and strategies."""

import argparse
import sys
from typing import Callable, Optional

from civforge.core.config import get_game_config
from civforge.core.data import Faction, UpgradeKind, summarize_army
from civforge.core.events import EventManager
from civforge.game import (
    AGGRESSIVE,
    BALANCED,
    DEFENSIVE,
    Civilization,
    LogManager,
    UnitFactory,
    UpgradeChain,
)
from civforge.renderers.console_renderer import (
    format_army_summary,
    format_attack_result,
    format_civilization_info,
    format_header,
    format_unit_card,
    format_unit_line,
)

USAGE = "Uso: python main.py [factory|strategy|decorator|all]"


def emit(lines: list[str]) -> None:
    for line in lines:
        print(line)


def demonstrate_factory(events: Optional[EventManager] = None) -> None:
    emit(format_header("FACTORY METHOD PATTERN"))

    british = UnitFactory(Faction.BRITISH, event_manager=events)
    french = UnitFactory(Faction.FRENCH, event_manager=events)

    for title, factory in (("CIVILIZAÇÃO BRITÂNICA", british), ("\nCIVILIZAÇÃO FRANCESA", french)):
        print(title)
        print("--Treinando exército--")
        army = factory.train_army()
        emit([format_unit_line(unit) for unit in army])
        print(format_army_summary(summarize_army(army)))

    print("\n=== Comparando Arqueiros ===")
    print(f"Britânico: {british.create_archer().attack} ataque")
    print(f"Francês: {french.create_archer().attack} ataque")


def demonstrate_strategy(events: Optional[EventManager] = None) -> None:
    emit(format_header("STRATEGY PATTERN"))

    romans = Civilization("Romanos", 1000, event_manager=events)

    print("FASE 1: INÍCIO DO JOGO")
    emit(format_civilization_info(romans.display_info()))
    emit(format_attack_result(romans.name, romans.attack()))

    for title, strategy in (
        ("FASE 2: RUSH OFFENSIVO", AGGRESSIVE),
        ("FASE 3: CONSOLIDANDO DEFESAS", DEFENSIVE),
    ):
        print(f"\n{title}")
        romans.set_strategy(strategy)
        print(f"{romans.name} mudou de estratégia: {strategy.name}")
        emit(format_civilization_info(romans.display_info()))
        romans.add_resources(200)
        print(f"{romans.name} ganhou 200 recursos!")
        emit(format_attack_result(romans.name, romans.attack()))


def demonstrate_decorator(events: Optional[EventManager] = None) -> None:
    emit(format_header("DECORATOR PATTERN"))
    print("EVOLUÇÃO DE UM ESPADACHIM\n")

    swordsman = UnitFactory(Faction.BRITISH).create_swordsman()
    chain = UpgradeChain(swordsman, event_manager=events)

    print("Nível 1: RECRUTA")
    emit(format_unit_card(chain.apply()))

    levels = (
        (UpgradeKind.ARMOR, "Aplicando Upgrade de Armadura...", "Nível 2: SOLDADO"),
        (UpgradeKind.WEAPON, "Aplicando Upgrade de Arma...", "Nível 3: GUERREIRO"),
        (UpgradeKind.ELITE_TRAINING, "Aplicando Treinamento Elite...", "Nível 4: GUARDA DE ELITE"),
        (UpgradeKind.VETERAN_STATUS, "Promovendo a Veterano...", "Nível 5: VETERANO DE GUERRA"),
    )
    for kind, action, level in levels:
        print(f"\n{action}")
        chain = chain.add(kind)
        print(level)
        emit(format_unit_card(chain.apply()))

    print("\n=== ANÁLISE DE CUSTOS ===")
    print(" -> ".join(f"{cost} ouro" for cost in chain.cost_progression()))


def demonstrate_all(events: Optional[EventManager] = None) -> None:
    emit(format_header("DEMONSTRAÇÃO COMPLETA - TODOS OS PADRÕES"))

    print("\nFASE 1: CRIAÇÃO DE EXÉRCITOS (Factory Method)\n")
    british_archer = UnitFactory(Faction.BRITISH, event_manager=events).create_archer()
    french_knight = UnitFactory(Faction.FRENCH, event_manager=events).create_knight()
    print("Britânicos criando exército:")
    print(format_unit_line(british_archer))
    print("\nFranceses criando exército:")
    print(format_unit_line(french_knight))

    print("\n\nFASE 2: MELHORANDO TROPAS (Decorator)\n")
    print("Melhorando arqueiro britânico:")
    archer = UpgradeChain(british_archer, [UpgradeKind.WEAPON, UpgradeKind.ELITE_TRAINING])
    emit(format_unit_card(archer.apply()))
    print("\nMelhorando cavaleiro francês:")
    knight = UpgradeChain(french_knight, [UpgradeKind.ARMOR, UpgradeKind.VETERAN_STATUS])
    emit(format_unit_card(knight.apply()))

    print("\n\nFASE 3: ESTRATÉGIAS DE COMBATE (Strategy)\n")
    england = Civilization("Inglaterra", 2000, event_manager=events)
    france = Civilization("França", 2000, event_manager=events)

    print("Inglaterra adota estratégia agressiva:")
    england.set_strategy(AGGRESSIVE)
    emit(format_civilization_info(england.display_info()))
    emit(format_attack_result(england.name, england.attack()))

    print("\nFrança responde com estratégia defensiva:")
    france.set_strategy(DEFENSIVE)
    emit(format_civilization_info(france.display_info()))
    emit(format_attack_result(france.name, france.attack()))

    print("\n\nFASE 4: AJUSTES TÁTICOS\n")
    england.set_strategy(BALANCED)
    print("Inglaterra muda para estratégia balanceada:")
    emit(format_attack_result(england.name, england.attack()))

    france.set_strategy(AGGRESSIVE)
    print("\nFrança contra-ataca com estratégia agressiva:")
    emit(format_attack_result(france.name, france.attack()))


DEMONSTRATIONS: dict[str, Callable[[Optional[EventManager]], None]] = {
    "factory": demonstrate_factory,
    "strategy": demonstrate_strategy,
    "decorator": demonstrate_decorator,
    "all": demonstrate_all,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Demonstrate faction factories, upgrades and combat strategies"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default="all",
        help="Demonstration to run: factory, strategy, decorator or all (default)",
    )
    parser.add_argument(
        "--show-log",
        action="store_true",
        help="Print the combat log collected during the demonstration",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    demonstration = DEMONSTRATIONS.get(args.mode.lower())

    if demonstration is None:
        print(USAGE)
        return 0

    events: Optional[EventManager] = None
    log_manager: Optional[LogManager] = None
    if args.show_log:
        events = EventManager()
        log_manager = LogManager.from_config(get_game_config(), events)

    demonstration(events)

    if events is not None and log_manager is not None:
        events.process_events()
        emit(format_header("REGISTRO DE COMBATE"))
        emit(log_manager.get_formatted_messages())
        stats = events.get_statistics()
        print(f"\nEventos entregues: {stats['events_delivered']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
