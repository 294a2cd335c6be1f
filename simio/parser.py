# Process table + sysconfig parser
import re
from typing import List, Optional, Tuple

from core.process import Process


def _parse_int(token: str, what: str, path: str, lineno: int, suffix: str = '') -> int:
    try:
        return int(token[:-len(suffix)] if suffix and token.endswith(suffix) else token)
    except ValueError:
        raise ValueError(f"{path}:{lineno}: {what} must be an integer, got {token!r}") from None


def parse_sysconfig(path: str) -> Tuple[Optional[int], Optional[int]]:
    """Read ``timequantum`` and ``horizon`` directives; missing ones come back as None."""
    time_quantum = None
    horizon = None
    with open(path, 'r') as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            parts = re.split(r'\s+', line)
            if len(parts) != 2:
                raise ValueError(f"{path}:{lineno}: expected '<directive> <value>', got {line!r}")
            if parts[0] == 'timequantum':
                time_quantum = _parse_int(parts[1], 'timequantum', path, lineno, suffix='ticks')
                value = time_quantum
            elif parts[0] == 'horizon':
                horizon = _parse_int(parts[1], 'horizon', path, lineno, suffix='ticks')
                value = horizon
            else:
                raise ValueError(f"{path}:{lineno}: unknown directive {parts[0]!r}")
            if value <= 0:
                raise ValueError(f"{path}:{lineno}: {parts[0]} must be positive, got {value}")
    return time_quantum, horizon


def parse_processes(path: str) -> List[Process]:
    """Read the process table: one ``<name> <priority> <burst> <arrival>`` row per line.

    A ``Process Priority Burst Arrival`` header and a dashed underline
    below it are skipped, as are blank lines and ``#`` comments.
    """
    processes: List[Process] = []
    seen = set()
    with open(path, 'r') as fh:
        for lineno, raw in enumerate(fh, start=1):
            line = raw.strip()
            if not line or line.startswith('#'):
                continue
            parts = re.split(r'\s+', line)
            if not processes and _is_header(parts):
                continue
            if len(parts) != 4:
                raise ValueError(f"{path}:{lineno}: expected 4 fields, got {len(parts)}")
            name = parts[0]
            priority = _parse_int(parts[1], 'priority', path, lineno)
            burst = _parse_int(parts[2], 'burst', path, lineno)
            arrival = _parse_int(parts[3], 'arrival', path, lineno)
            if name in seen:
                raise ValueError(f"{path}:{lineno}: duplicate process {name!r}")
            if burst <= 0:
                raise ValueError(f"{path}:{lineno}: burst must be positive, got {burst}")
            if arrival < 0:
                raise ValueError(f"{path}:{lineno}: arrival must not be negative, got {arrival}")
            seen.add(name)
            processes.append(Process(name, priority, burst, arrival))
    return processes


def _is_header(parts: List[str]) -> bool:
    if all(set(p) <= {'-'} for p in parts):
        return True
    return len(parts) > 1 and parts[0].lower() == 'process' and parts[1].lower() == 'priority'
