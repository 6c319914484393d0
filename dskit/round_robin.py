"""Round-robin CPU scheduling: turnaround times for a queue of processes."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Iterable, Sequence

_SEPARATORS = re.compile(r"[,\s]+")


class RoundRobinScheduler:
    """Runs processes in turn, each for at most ``time_slice`` time units."""

    def __init__(self, time_slice: int, execution_times: Iterable[int] = ()) -> None:
        if time_slice <= 0:
            raise ValueError("time slice must be positive")
        self.time_slice = time_slice
        self.execution_times: list[int] = list(execution_times)
        if any(time < 0 for time in self.execution_times):
            raise ValueError("execution times must not be negative")
        self.turnaround_times: list[int] | None = None

    @classmethod
    def from_text(cls, text: str) -> RoundRobinScheduler:
        """Build a scheduler from a time slice line and a line of process times.

        The second line lists execution times separated by commas or spaces;
        it may be missing. Raise ValueError on malformed input.
        """
        lines = text.splitlines()
        if not lines or not lines[0].strip():
            raise ValueError("missing time slice")
        try:
            time_slice = int(lines[0].strip())
        except ValueError:
            raise ValueError(f"invalid time slice: {lines[0].strip()!r}") from None
        times: list[int] = []
        if len(lines) > 1:
            fields = [field for field in _SEPARATORS.split(lines[1]) if field]
            try:
                times = [int(field) for field in fields]
            except ValueError as error:
                raise ValueError(f"invalid execution time: {error}") from None
        return cls(time_slice, times)

    @classmethod
    def from_file(cls, path: str | Path) -> RoundRobinScheduler:
        """Build a scheduler from a file in the format read by ``from_text``."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    def process(self) -> list[int]:
        """Simulate the schedule and return each process's turnaround time.

        A process with no execution time completes at time 0.
        """
        remaining = list(self.execution_times)
        turnaround = [0] * len(remaining)
        clock = 0
        while any(time > 0 for time in remaining):
            for index, time in enumerate(remaining):
                if time <= 0:
                    continue
                if time > self.time_slice:
                    clock += self.time_slice
                    remaining[index] = time - self.time_slice
                else:
                    clock += time
                    remaining[index] = 0
                    turnaround[index] = clock
        self.turnaround_times = turnaround
        return list(turnaround)

    def _results(self) -> list[int]:
        if self.turnaround_times is None:
            return self.process()
        return self.turnaround_times

    def average_turnaround(self) -> float:
        """Return the mean turnaround time; raise ValueError with no processes."""
        results = self._results()
        if not results:
            raise ValueError("no processes to schedule")
        return sum(results) / len(results)

    def format_results(self) -> str:
        """Return the turnaround time of each process and their average."""
        lines = ["Turnaround times for each process:"]
        lines.extend(
            f"Process {number}: {time}"
            for number, time in enumerate(self._results(), start=1)
        )
        lines.append(f"Average turnaround time: {self.average_turnaround():g}")
        return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Load processes from a file, schedule them and print the results."""
    parser = argparse.ArgumentParser(description="Round-robin process scheduling.")
    parser.add_argument("path", nargs="?", default="process.txt")
    args = parser.parse_args(argv)

    try:
        scheduler = RoundRobinScheduler.from_file(args.path)
    except OSError as error:
        parser.exit(1, f"Error: {error}\n")
    except ValueError as error:
        parser.exit(1, f"Error: {error}\n")

    print("Loaded process execution times:")
    print("".join(f"{time} " for time in scheduler.execution_times))
    print("Processor time slice:")
    print(scheduler.time_slice)
    scheduler.process()
    try:
        print(scheduler.format_results())
    except ValueError as error:
        parser.exit(1, f"Error: {error}\n")
    return 0