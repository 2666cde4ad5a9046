# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser

from game2048.addons import GameConfig
from game2048.envs import GameEngine
from game2048.utils import Leaderboard, ManualControl, WindowBoard

if __name__ == "__main__":
    parser = ArgumentParser(description="Play 2048 with the keyboard (arrows or WASD, u: undo, r: restart)")
    parser.add_argument("--size", type=int, default=4, help="Side of the grid")
    parser.add_argument("--win-value", type=int, default=2048, help="Tile value that wins the game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the tile generator")
    parser.add_argument("--verbose", action="store_true", help="Log every key press and rejected move")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = GameEngine(GameConfig(size=args.size, win_value=args.win_value, seed=args.seed))
    window_board = WindowBoard(title="2048 Game", size=engine.size)
    control = ManualControl(engine=engine, window=window_board, leaderboard=Leaderboard())
    window_board.register_key_handler(control.key_handler)

    control.redraw()

    # Blocking event loop
    window_board.show(block=True)
