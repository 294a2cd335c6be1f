"""
prioscheduler.py


Discrete-time simulation of preemptive priority scheduling with
round-robin among processes of equal priority.


The simulation is split across:
- Process   (core/process.py)   per-process record and counters
- Scheduler (core/scheduler.py) priority-ordered ready queue + running slot
- Event     (core/event.py)     trace of scheduling decisions
- System    (core/system.py)    the per-tick loop
- Parsers for the process table and sysconfig (simio/parser.py)
- The final per-process report (simio/report.py)


Usage:
python prioscheduler.py processes.txt [-c sysconfig.txt] [-q 10] [-n 96] [-v]


The process table holds one process per line (name, priority, burst,
arrival), optionally preceded by a header. Higher priority values win.
After the fixed number of ticks the turnaround and wait time of every
process is printed in input order.
"""


import sys
import argparse

from simio.parser import parse_sysconfig, parse_processes
from core.system import System, TIME_QUANTUM, HORIZON


def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {n}")
    return n


# ------------------------------- CLI ---------------------------------
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='prioscheduler (preemptive priority + round-robin simulator)')
    parser.add_argument('processes', help='Path to process data file')
    parser.add_argument('-c', '--sysconfig', help='Path to sysconfig file (timequantum, horizon)')
    parser.add_argument('-q', '--quantum', type=positive_int, help=f'Time quantum in ticks (default {TIME_QUANTUM})')
    parser.add_argument('-n', '--horizon', type=positive_int, help=f'Number of ticks to simulate (default {HORIZON})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging of scheduling events')
    args = parser.parse_args(argv)

    tq, horizon = TIME_QUANTUM, HORIZON
    try:
        if args.sysconfig:
            cfg_tq, cfg_horizon = parse_sysconfig(args.sysconfig)
            tq = cfg_tq or tq
            horizon = cfg_horizon or horizon
        processes = parse_processes(args.processes)
    except FileNotFoundError as e:
        print(f"File not found: {e.filename}")
        return 2
    except ValueError as e:
        print(f"Invalid input: {e}")
        return 2

    if args.quantum is not None:
        tq = args.quantum
    if args.horizon is not None:
        horizon = args.horizon

    if args.verbose:
        print(f"found {len(processes)} processes")
        print(f"time quantum is {tq}")
        print(f"horizon is {horizon}")
    s = System(processes, time_quantum=tq, horizon=horizon, verbose=args.verbose)
    s.start()
    return 0


if __name__ == '__main__':
    sys.exit(main())
