"""
Web API for the Set solver.

FastAPI backend that takes a board as rows of card codes and returns
every Set on it plus the largest group of disjoint Sets.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from set_solver.generate.board_generator import DEFAULT_BOARD_SIZE, DECK_SIZE, deal_board
from set_solver.solve import DEFAULT_BOARD, DEFAULT_MAX_FRONTIER, LOG_FORMAT, solve
from set_solver.solver import Board, InvalidLiteral, SearchLimitExceeded

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Set Solver")


class SolveRequest(BaseModel):
    board: List[List[str]] = DEFAULT_BOARD
    max_frontier: Optional[int] = DEFAULT_MAX_FRONTIER


@app.post("/api/solve")
def solve_board(request: SolveRequest):
    """Parse the board, find its Sets and the largest disjoint group."""
    try:
        board = Board.from_layout(request.board)
    except InvalidLiteral as exc:
        logger.info(f"Rejected board: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        return solve(board, max_frontier=request.max_frontier)
    except SearchLimitExceeded as exc:
        logger.warning(f"Search limit hit: {exc}")
        raise HTTPException(status_code=422, detail=str(exc))


@app.get("/api/deal")
def deal(
    size: int = Query(DEFAULT_BOARD_SIZE, ge=0, le=DECK_SIZE),
    seed: Optional[int] = Query(None, ge=0),
):
    """Deal a random board that holds at least one Set."""
    return {"board": deal_board(size=size, seed=seed)}


def main():
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Set Solver web server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print(f"\n  Set Solver running at http://{args.host}:{args.port}\n")
    uvicorn.run("set_solver.web.app:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
