from __future__ import annotations

import argparse
import time
from typing import List, Optional, Set

from .config import PRESETS, preset
from .errors import InvalidArgument, InvalidConfig
from .scheduler import ManualScheduler
from .settings import Settings, configure_logging
from .state import CardState, GameState


def _face_up(game: GameState) -> Set[int]:
    snap = game.snapshot()
    return {i for i, s in enumerate(snap.cards) if s is not CardState.HIDDEN}


def _labels(game: GameState) -> List[str]:
    return [game.symbol_for(p) for p in range(game.config.total_pairs)]


def _print_board(game: GameState) -> None:
    print(game.board.pretty(_face_up(game), _labels(game)))
    print(game.stats_line())
    recent = game.recent_matches()
    if recent:
        print('Latest matches:', ' '.join(recent))


def _parse_index(text: str, game: GameState) -> int:
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    if len(parts) == 2:
        r, c = int(parts[0]), int(parts[1])
        if not (0 <= r < game.config.rows and 0 <= c < game.config.cols):
            raise InvalidArgument(f'cell {r},{c} is off the board')
        return game.board.index(r, c)
    if len(parts) == 1:
        return int(parts[0])
    raise ValueError(text)


def _wait_out(game: GameState, scheduler: ManualScheduler) -> None:
    """Shows the two flipped cards, sleeps through the resolution delay, then applies it."""
    delay = scheduler.next_delay()
    if delay is None:
        return
    _print_board(game)
    time.sleep(delay / 1000.0)
    scheduler.advance(delay)


def main(argv: Optional[List[str]] = None) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description='Card flip memory game')
    parser.add_argument('--difficulty', choices=[d.value for d in PRESETS], default=settings.difficulty,
                        help='Board preset')
    parser.add_argument('--seed', type=int, default=settings.seed, help='RNG seed for deal')
    parser.add_argument('--play', action='store_true', help='Play interactively')
    parser.add_argument('--reveal', action='store_true', help='Print the dealt pair ids')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level')
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    scheduler = ManualScheduler()
    game = GameState(preset(args.difficulty), seed=args.seed, scheduler=scheduler)

    if not args.play:
        cfg = game.config
        print(f'{cfg.difficulty_name}: {cfg.description}')
        print(game.board.pretty(set()))
        if args.reveal:
            print('\nDealt pairs:')
            print(game.board.pretty())
        return

    print(f'{game.config.difficulty_name}: {game.config.description}')
    print("Enter a card as index or r,c. 'n' new game, 'easy'/'medium'/'hard' to switch, 'q' quits.")
    _print_board(game)
    while True:
        try:
            text = input('> ').strip().lower()
        except EOFError:
            return
        if text in ('q', 'quit'):
            return
        if text in ('n', 'new'):
            game.request_new_game()
            _print_board(game)
            continue
        if text in [d.value for d in PRESETS]:
            game.select_difficulty(text)
            print(f'{game.config.difficulty_name}: {game.config.description}')
            _print_board(game)
            continue
        try:
            index = _parse_index(text, game)
            before = game.snapshot().version
            snap = game.flip(index)
        except (InvalidArgument, InvalidConfig) as e:
            print(f'error: {e}')
            continue
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if snap.version == before:
            print('That card cannot be flipped right now.')
            continue
        if game.is_resolving():
            _wait_out(game, scheduler)
        _print_board(game)
        if game.is_won():
            print(f'🎉 YOU WIN! 🎉  ({game.move_count()} moves)')
            print("Type 'n' to play again or 'q' to quit.")
