"""
Management command to analyze a backgammon position.

Usage:
    python manage.py analyze_position [--side light] [--depth 1] [--dice 6 5]
    python manage.py analyze_position --points "18:5,20:5,22:5" --points "5:-15" \
        --depth 2 --dice 6 5

Prints pip counts, the expectimax value of the position and, when dice
are given, the best turn for that roll.
"""
from typing import Dict

from django.core.management.base import BaseCommand, CommandError

from apps.game.conf import engine_setting
from apps.game.exceptions import NoLegalMoves
from apps.game.services.game_engine import DARK, LIGHT, BoardState


def parse_points(specs) -> Dict[int, int]:
    """Parse "index:count" pairs, e.g. "0:2,5:-5", into a mapping."""
    points = {}
    for spec in specs:
        for item in spec.split(','):
            item = item.strip()
            if not item:
                continue
            try:
                index, count = item.split(':')
                points[int(index)] = points.get(int(index), 0) + int(count)
            except ValueError:
                raise CommandError(f"Invalid point spec '{item}', expected index:count")
    return points


class Command(BaseCommand):
    help = 'Evaluate a backgammon position with the expectimax search'

    def add_arguments(self, parser):
        parser.add_argument(
            '--points',
            action='append',
            default=[],
            help='Custom position as index:count pairs (Light positive, Dark negative). '
                 'Defaults to the standard starting position.',
        )
        parser.add_argument(
            '--captured',
            type=int,
            nargs=2,
            default=[0, 0],
            metavar=('LIGHT', 'DARK'),
            help='Checkers on the bar (default: 0 0)',
        )
        parser.add_argument(
            '--finished',
            type=int,
            nargs=2,
            default=[0, 0],
            metavar=('LIGHT', 'DARK'),
            help='Checkers borne off (default: 0 0)',
        )
        parser.add_argument(
            '--side',
            type=str,
            default=LIGHT,
            choices=[LIGHT, DARK],
            help='Side to move (default: light)',
        )
        parser.add_argument(
            '--depth',
            type=int,
            default=None,
            help='Search depth in plies (default: BACKGAMMON_ENGINE SEARCH_DEPTH)',
        )
        parser.add_argument(
            '--dice',
            type=int,
            nargs=2,
            default=None,
            help='Roll to find the best turn for, e.g. --dice 6 5',
        )

    def handle(self, *args, **options):
        from apps.ai.evaluation.expectimax import ExpectimaxEvaluator

        depth = options['depth']
        if depth is None:
            depth = engine_setting('SEARCH_DEPTH')
        side = options['side']

        try:
            if options['points']:
                state = BoardState.from_points(
                    parse_points(options['points']),
                    captured=tuple(options['captured']),
                    finished=tuple(options['finished']),
                )
            else:
                state = BoardState.standard()
            state.validate()
        except ValueError as e:
            raise CommandError(f"Invalid position: {e}")

        light_pips, dark_pips = state.total_pip_distance()
        self.stdout.write(f"Pips remaining: light {light_pips}, dark {dark_pips}")

        evaluator = ExpectimaxEvaluator()

        try:
            value = evaluator.evaluate(state, side, depth)
            self.stdout.write(self.style.SUCCESS(
                f"Value at depth {depth} ({side} to move): {value:.3f}"
                f"\n  Positions searched: {evaluator.nodes_evaluated}"
            ))

            if options['dice']:
                turn, turn_value = evaluator.best_turn(
                    state, side, options['dice'], max(depth, 1)
                )
                moves = ', '.join(f"{origin}->{target}" for origin, target in turn.moves)
                self.stdout.write(
                    f"Best turn for {options['dice'][0]}-{options['dice'][1]}: "
                    f"{moves or 'pass'} (value {turn_value:.3f})"
                )
        except (ValueError, NoLegalMoves) as e:
            raise CommandError(str(e))
