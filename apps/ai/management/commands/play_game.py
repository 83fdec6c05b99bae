"""
Management command to play games between two players.

Usage:
    python manage.py play_game [--light expectimax] [--dark random] [--games 2] [--seed 7]
"""
from django.core.management.base import BaseCommand, CommandError

from apps.game.conf import engine_setting


class Command(BaseCommand):
    help = 'Play backgammon games between two players'

    def add_arguments(self, parser):
        parser.add_argument(
            '--light',
            type=str,
            default='expectimax',
            choices=['expectimax', 'random'],
            help='Player type for the first player (default: expectimax)',
        )
        parser.add_argument(
            '--dark',
            type=str,
            default='random',
            choices=['expectimax', 'random'],
            help='Player type for the second player (default: random)',
        )
        parser.add_argument(
            '--games',
            type=int,
            default=1,
            help='Number of games, alternating colors (default: 1)',
        )
        parser.add_argument(
            '--depth',
            type=int,
            default=None,
            help='Search depth for expectimax players (default: BACKGAMMON_ENGINE SEARCH_DEPTH)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for dice and random players',
        )

    def handle(self, *args, **options):
        from apps.ai.matches.runner import MatchRunner
        from apps.ai.players import ExpectimaxPlayer, RandomPlayer

        if options['games'] < 1:
            raise CommandError("--games must be at least 1")

        depth = options['depth']
        if depth is None:
            depth = engine_setting('SEARCH_DEPTH')

        seed = options['seed']

        def build(kind, player_id, player_seed):
            if kind == 'expectimax':
                return ExpectimaxPlayer(player_id=player_id, depth=depth)
            return RandomPlayer(player_id=player_id, seed=player_seed)

        # Random players draw from separate streams
        player_a = build(options['light'], f"{options['light']}_a", seed)
        player_b = build(
            options['dark'],
            f"{options['dark']}_b",
            None if seed is None else seed + 1,
        )

        runner = MatchRunner(seed=seed)

        try:
            result = runner.run_match(player_a, player_b, num_games=options['games'])
        except ValueError as e:
            raise CommandError(str(e))

        for i, game in enumerate(result.games, start=1):
            if game.is_draw:
                self.stdout.write(f"Game {i}: draw after {game.num_turns} turns")
            else:
                self.stdout.write(
                    f"Game {i}: {game.winner} ({game.player_colors[game.winner]}) wins "
                    f"{game.points} point(s) in {game.num_turns} turns"
                )

        self.stdout.write(self.style.SUCCESS(
            f"\nMatch finished!"
            f"\n  {player_a.player_id}: {result.player_a_wins} wins, {result.player_a_points} points"
            f"\n  {player_b.player_id}: {result.player_b_wins} wins, {result.player_b_points} points"
            f"\n  Draws: {result.draws}"
        ))
