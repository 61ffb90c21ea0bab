"""Time-weighted average price execution that logs child orders to CSV."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from os import PathLike
from typing import TextIO


@dataclass(frozen=True)
class ChildOrder:
    """One slice of the parent order."""

    id: int
    price: float
    size: int


class ExecutionLog:
    """Records executed orders to a CSV file and reports them on a stream."""

    def __init__(self, path: str | PathLike, output: TextIO | None = None) -> None:
        self._file = open(path, "w", encoding="utf-8", newline="")
        self._file.write("order_id,price,size\n")
        self._output = output

    def execute_order(self, order: ChildOrder) -> None:
        """Log one executed order."""
        self._file.write(f"{order.id},{order.price:g},{order.size}\n")
        print(
            f"Executed order: ID={order.id} Price={order.price:g} Size={order.size}",
            file=self._output or sys.stdout,
        )

    def close(self) -> None:
        """Flush and close the log file."""
        self._file.close()

    def __enter__(self) -> ExecutionLog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class TWAPStrategy:
    """Splits a quantity into equal slices executed at a fixed interval."""

    log: ExecutionLog
    total_quantity: int
    steps: int
    price: float = 100.0
    delay: float = 0.1

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be at least 1")

    def execute(self) -> list[ChildOrder]:
        """Send every slice to the log, pausing between them; any remainder is dropped."""
        slice_size = int(self.total_quantity / self.steps)
        orders = []
        for i in range(self.steps):
            order = ChildOrder(i + 1, self.price, slice_size)
            self.log.execute_order(order)
            orders.append(order)
            if self.delay > 0:
                time.sleep(self.delay)
        return orders


def main(argv: list[str] | None = None) -> int:
    """Execute a TWAP schedule and save the fills."""
    parser = argparse.ArgumentParser(description="TWAP execution simulator")
    parser.add_argument("--quantity", type=int, default=1000)
    parser.add_argument("--steps", type=int, default=10)
    parser.add_argument("--delay", type=float, default=0.1)
    parser.add_argument("--output", default="ExecutionLog.csv")
    args = parser.parse_args(argv)

    with ExecutionLog(args.output) as log:
        TWAPStrategy(log, args.quantity, args.steps, delay=args.delay).execute()
    print(f"Execution complete. Log saved to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())