# termsnake/main.py
import argparse
import logging
import os
import sys

from termsnake.config import AppConfig
from termsnake.core.errors import SnakeError
from termsnake.runners import create_board, run_scoreboard, run_snake


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    p.add_argument("mode", choices=["play", "boards", "scores", "create"])
    p.add_argument("--board", help="board name (play/scores)")
    p.add_argument("--name", default="", help="name for a new board (create)")
    p.add_argument("--size", type=int, help="side length of a new board (create)")
    p.add_argument("--length", type=int, help="initial snake length")
    p.add_argument("--walled", action="store_true", help="the frame is solid instead of wrapping")
    p.add_argument("--seed", type=int)
    p.add_argument("--tick-ms", type=int)
    p.add_argument("--data-dir")
    p.add_argument("--session-log", help="append finished sessions to this CSV file")
    p.add_argument("--log-level")
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {
        "start_len": args.length,
        "seed": args.seed,
        "tick_ms": args.tick_ms,
        "data_dir": args.data_dir,
        "session_log": args.session_log,
        "log_level": args.log_level,
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    if args.walled:
        cfg = cfg.with_(boundary="walled")
    return cfg


def configure_logging(cfg: AppConfig) -> None:
    level = getattr(logging, cfg.log_level.upper(), logging.INFO)
    if cfg.log_file is None:
        logging.basicConfig(level=level)
        return
    data_dir = os.path.expanduser(cfg.data_dir)
    path = cfg.log_file if os.path.isabs(cfg.log_file) else os.path.join(data_dir, cfg.log_file)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    logging.basicConfig(
        filename=path,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = build_config(args)
    configure_logging(cfg)

    try:
        if args.mode == "boards":
            print(run_scoreboard.show_boards(cfg))
        elif args.mode == "scores":
            print(run_scoreboard.show_scores(cfg, args.board))
        elif args.mode == "create":
            board = create_board.main(cfg, args.name, args.size)
            if board is not None:
                print(f"saved board {board.name!r}")
        elif args.mode == "play":
            score = run_snake.main(cfg, args.board)
            print(f"Final score: {score}")
    except SnakeError as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 2
    except KeyError as e:
        print(f"termsnake: {e.args[0]}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
