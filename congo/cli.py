"""Line protocol for playing Congo: position, go, moves and END."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from congo.agent import Agent
from congo.board import STARTING_FEN
from congo.pieces import Move

_MS_PER_SECOND = 1000


def run(lines: Iterable[str], out: TextIO) -> Agent:
    """Answer commands until END or the end of input; return the agent used."""
    agent = Agent(STARTING_FEN)

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "END":
            break

        instruction, _, rest = line.partition(" ")
        if instruction == "position":
            agent.update_board(rest)
        elif instruction == "go":
            move = agent.get_move(int(rest) * _MS_PER_SECOND)
            out.write(f"{move}\n")
            out.flush()
            if move != Agent.NO_MOVE:
                agent.make_move(move)
        elif instruction == "moves":
            agent.make_move(Move.parse(rest))

    return agent


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and write moves to standard output."""
    parser = argparse.ArgumentParser(
        prog="congo",
        description="Play Congo over a line protocol on standard input and output.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())