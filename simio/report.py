# Per-process statistics dump
from typing import Iterable, List

from core.process import Process


def format_report(processes: Iterable[Process]) -> List[str]:
    lines = ["output:"]
    for p in processes:
        lines.append(f"\t{p.name},  turnaround time: {p.turnaround:2d},  wait time: {p.wait:2d}")
    return lines
