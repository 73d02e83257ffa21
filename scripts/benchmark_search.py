#!/usr/bin/env python3
"""
Benchmark alpha-beta search on Kalah(6,4).

Measures, for each depth:
1. Nodes visited by best_move from the opening and a midgame position
2. Wall-clock time per search
3. Recommended move and score
"""

import logging
import time

from mancala_advisor.core import apply_move, create_rules, init_standard
from mancala_advisor.play import replay_moves
from mancala_advisor.solver import best_move

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def main():
    # Configuration
    MAX_DEPTH = 8
    MIDGAME_MOVES = "cfBAd"

    rules = create_rules()
    positions = {
        "opening": init_standard(rules),
        "after c": apply_move(init_standard(rules), rules, 2).state,
        "midgame": replay_moves(rules, MIDGAME_MOVES).state,
    }

    logger.info("=" * 70)
    logger.info(f"SEARCH BENCHMARK - {rules}")
    logger.info("=" * 70)

    for name, state in positions.items():
        logger.info(f"Position: {name}")
        for depth in range(1, MAX_DEPTH + 1):
            start = time.time()
            rec = best_move(state, rules, depth)
            elapsed = time.time() - start
            rate = rec.nodes / elapsed if elapsed > 0 else 0.0
            logger.info(
                f"  depth {depth}: move={rec.move} score={rec.score:g} "
                f"nodes={rec.nodes:,} time={elapsed:.3f}s ({rate:,.0f} nodes/s)"
            )
        logger.info("")


if __name__ == "__main__":
    main()
