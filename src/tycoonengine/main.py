"""Command‑line demo runner for tycoonengine."""

from __future__ import annotations

import argparse
import logging

from tycoonengine.catalog import Category
from tycoonengine.helpers import format_number, format_percentage, format_time
from tycoonengine.session import GameSession


def _cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a headless idle-tycoon session.")
    p.add_argument("--config", default=None, help="YAML config file")
    p.add_argument("--seconds", type=int, default=600, help="Simulated seconds")
    p.add_argument(
        "--clicks-per-second", type=int, default=5, help="Work clicks per second"
    )
    p.add_argument("--save-dir", default=None, help="Directory for save files")
    p.add_argument("--catalog", default=None, help="JSON catalog path")
    p.add_argument("--reset", action="store_true", help="Discard any saved game first")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _buy_cheapest(session: GameSession) -> bool:
    """Buy the cheapest affordable unlocked item, if any."""
    best: tuple[int | float, Category, str] | None = None
    for category in (Category.FINANCIAL, Category.REAL_ESTATE):
        for item in session.catalog.get_all_of_category(category):
            if not session.is_unlocked(category, item.id):
                continue
            cost = session.cost(category, item.id)
            if cost <= session.state.cash and (best is None or cost < best[0]):
                best = (cost, category, item.id)
    if best is None:
        return False
    return session.purchase(best[1], best[2])


def main(argv: list[str] | None = None) -> None:
    args = _cli(argv)

    level = "DEBUG" if args.verbose else "INFO"
    overrides: dict[str, object] = {"logging": {"default_level": level}}
    if args.save_dir is not None:
        overrides["save_dir"] = args.save_dir
    if args.catalog is not None:
        overrides["catalog_path"] = args.catalog

    # simulated clock so the run is instant and deterministic
    now = [0.0]
    session = GameSession.init(args.config, clock=lambda: now[0], **overrides)
    if args.reset:
        session.reset()

    log = logging.getLogger(__name__)
    session.on_unlock(lambda item: log.info("Unlocked %s %s", item.icon, item.name))

    for _ in range(args.seconds):
        for _ in range(args.clicks_per_second):
            session.work_click()
        while _buy_cheapest(session):
            pass
        now[0] += session.config.tick_interval
        session.advance()

    stats = session.stats()
    session.close()

    log.info("=== RESULT after %s ===", format_time(stats.play_time_seconds))
    log.info("Career: %s (%d clicks)", stats.career.name, stats.total_clicks)
    log.info(
        "Cash: %s, total assets: %s",
        format_number(stats.cash),
        format_number(stats.total_assets),
    )
    log.info(
        "RPS: %s/s, per click: %s",
        format_number(stats.total_rps),
        format_number(stats.income_per_click),
    )
    rb = stats.revenue_breakdown
    log.info(
        "Revenue: work %s, financial %s, real estate %s",
        format_percentage(rb.work),
        format_percentage(rb.financial),
        format_percentage(rb.real_estate),
    )
    for rank, entry in enumerate(stats.efficiency_ranking, start=1):
        log.info(
            "  %d. %s  %s/s per unit",
            rank,
            entry.item.name,
            format_number(entry.efficiency),
        )


if __name__ == "__main__":
    main()
