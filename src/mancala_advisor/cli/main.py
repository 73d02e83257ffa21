"""
Main CLI for the Mancala advisor.
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from ..core import (
    ConfigError,
    MoveError,
    apply_move,
    create_rules,
    final_margin,
    generate_legal_moves,
    get_game_result,
    init_standard,
    is_terminal,
)
from ..play import GameMode, GameSession, NotationError, replay_moves
from ..solver import best_move, score_moves
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def rules_from_args(args):
    """Build the rules configuration from the shared rules flags."""
    return create_rules(
        pits_per_side=args.pits,
        seeds_per_pit=args.seeds,
        extra_turn_on_store=not args.no_extra_turn,
        sweep_on_game_end=not args.no_sweep,
        capture_rule=args.capture,
        allow_move_from_empty=args.allow_empty,
    )


def play_command(args, input_fn=input):
    """Play an interactive game in the terminal."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = BoardDisplay()

    rules = rules_from_args(args)
    mode = GameMode(args.mode)
    session = GameSession(rules, mode=mode, depth=args.depth)
    session.subscribe(display.show_move)

    if args.moves:
        session.load(args.moves)

    display.show_header(
        "Mancala Advisor",
        str(rules),
        mode.value,
        None if mode is GameMode.HvH else args.depth,
    )

    while not session.is_over:
        display.show_board(session.state)

        if not session.is_human_turn():
            session.play_ai()
            continue

        try:
            choice = input_fn(
                f"Side {session.state.to_move} pit (0-{rules.pits_per_side - 1}, u=undo, q=quit): "
            ).strip().lower()
        except EOFError:
            choice = "q"

        if choice == "q":
            display.log_warning("Game abandoned")
            return 1
        if choice == "u":
            if not session.undo_to_human_turn():
                display.log_warning("Nothing to undo")
            continue

        try:
            pit_index = int(choice)
        except ValueError:
            display.log_error(f"Not a pit number: {choice!r}")
            continue

        try:
            session.play(pit_index)
        except MoveError as e:
            display.log_error(str(e))

    display.show_board(session.state, title="Final position")
    display.log_success(get_game_result(session.state, rules) or "Game over")
    display.log_info(f"Moves: {session.move_string}")

    summary = session.summary()
    if summary is not None and args.summary_out:
        out_path = Path(args.summary_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(summary.to_dict(), indent=2))
        logger.info(f"Wrote game summary to {out_path}")

    return 0


def analyze_command(args):
    """Score every legal move in a position reached from a move string."""
    setup_rich_logging(args.log_level)
    display = BoardDisplay()

    rules = rules_from_args(args)
    replay = replay_moves(rules, args.moves or "")
    state = replay.state

    display.show_board(state, title=f"After {len(replay.moves)} plies")

    if is_terminal(state, rules):
        display.log_success(get_game_result(state, rules) or "Game over")
        return 0

    scored = score_moves(state, rules, args.depth)
    display.show_moves(scored, state.to_move)

    rec = best_move(state, rules, args.depth)
    if rec.has_move:
        display.log_success(
            f"Recommended: pit {rec.move} (score {rec.score:g}, {rec.nodes:,} nodes)"
        )
    else:
        display.log_warning("No move available")
    return 0


def play_match_game(rules, depths, random_plies: int, rng: random.Random) -> int:
    """
    Play one AI-vs-AI game.

    Args:
        rules: Rules configuration
        depths: Search depth for side 0 and side 1
        random_plies: Number of opening plies chosen at random
        rng: Random source for the opening

    Returns:
        Final margin from side 0's perspective
    """
    state = init_standard(rules)
    plies = 0

    while not is_terminal(state, rules):
        moves = generate_legal_moves(state, rules)
        if not moves:
            break

        if plies < random_plies:
            move = rng.choice(moves)
        else:
            move = best_move(state, rules, depths[state.to_move]).move

        state = apply_move(state, rules, move).state
        plies += 1

    return final_margin(state, rules)


def match_command(args):
    """Play a series of AI-vs-AI games."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    rules = rules_from_args(args)
    rng = random.Random(args.seed)
    depths = (args.depth0, args.depth1)

    logger.info(f"Match {rules}: side 0 depth {depths[0]} vs side 1 depth {depths[1]}")
    logger.info(f"Games: {args.games}, random opening plies: {args.random_plies}")

    wins = [0, 0]
    ties = 0
    total_margin = 0

    for _ in tqdm(range(args.games), desc="Match", unit=" game"):
        margin = play_match_game(rules, depths, args.random_plies, rng)
        total_margin += margin
        if margin > 0:
            wins[0] += 1
        elif margin < 0:
            wins[1] += 1
        else:
            ties += 1

    logger.info("=" * 60)
    logger.info("MATCH COMPLETE")
    logger.info("=" * 60)
    logger.info(f"Side 0 wins: {wins[0]}")
    logger.info(f"Side 1 wins: {wins[1]}")
    logger.info(f"Ties: {ties}")
    if args.games:
        logger.info(f"Average margin (side 0): {total_margin / args.games:+.2f}")

    return 0


def add_rules_arguments(parser):
    """Rules flags shared by every command."""
    parser.add_argument("--pits", type=int, default=6, help="Number of pits per side")
    parser.add_argument("--seeds", type=int, default=4, help="Initial seeds per pit")
    parser.add_argument(
        "--no-extra-turn", action="store_true", help="No extra turn for landing in own store"
    )
    parser.add_argument(
        "--no-sweep", action="store_true", help="Leave remaining seeds in pits at game end"
    )
    parser.add_argument(
        "--capture", choices=["kalah", "none"], default="kalah", help="Capture rule"
    )
    parser.add_argument(
        "--allow-empty", action="store_true", help="Allow sowing from empty pits"
    )


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Mancala rules engine and move advisor")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    add_rules_arguments(play_parser)
    play_parser.add_argument(
        "--mode", choices=[m.value for m in GameMode], default="HvAI", help="Who plays each side"
    )
    play_parser.add_argument("--depth", type=int, default=6, help="AI search depth")
    play_parser.add_argument("--moves", default="", help="Move string to start from")
    play_parser.add_argument(
        "--summary-out", default=None, help="Write the finished game summary as JSON"
    )
    play_parser.set_defaults(func=play_command)

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Score the moves in a position")
    add_rules_arguments(analyze_parser)
    analyze_parser.add_argument("--moves", default="", help="Move string from the start")
    analyze_parser.add_argument("--depth", type=int, default=6, help="Search depth")
    analyze_parser.set_defaults(func=analyze_command)

    # Match command
    match_parser = subparsers.add_parser("match", help="Play AI-vs-AI games")
    add_rules_arguments(match_parser)
    match_parser.add_argument("--games", type=int, default=10, help="Number of games")
    match_parser.add_argument("--depth0", type=int, default=4, help="Search depth for side 0")
    match_parser.add_argument("--depth1", type=int, default=4, help="Search depth for side 1")
    match_parser.add_argument(
        "--random-plies", type=int, default=2, help="Random opening plies per game"
    )
    match_parser.add_argument("--seed", type=int, default=42, help="Random seed")
    match_parser.set_defaults(func=match_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        code = args.func(args)
    except (ConfigError, NotationError) as e:
        BoardDisplay().log_error(str(e))
        code = 2

    sys.exit(code)


if __name__ == "__main__":
    main()
