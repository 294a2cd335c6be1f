from typing import Any, List, Optional

from core.process import Process
from core.event import Event, EventType
from core.scheduler import Scheduler
from simio.report import format_report


# Constants
TIME_QUANTUM = 10  # ticks a process may run before being time-sliced
HORIZON = 96       # length of the simulated period in ticks


class System:
    def __init__(self, processes: List[Process], time_quantum: int = TIME_QUANTUM,
                 horizon: int = HORIZON, verbose: bool = False):
        # master list in creation order; the ready queue only holds references into it
        self.processes = list(processes)
        self.time_quantum = time_quantum
        self.horizon = horizon
        self.verbose = verbose

        self.current_time = 0
        self.events: List[Event] = []

        self.scheduler = Scheduler(time_quantum=time_quantum)

    # event trace helpers
    def push_event(self, etype: EventType, process: Optional[Process] = None, payload: Any = None):
        ev = Event(time=self.current_time, type=etype, process=process, payload=payload)
        self.events.append(ev)
        if self.verbose:
            name = getattr(process, 'name', None)
            print(f"[t={self.current_time}] {etype.name} {name} payload={payload}")
        return ev

    def events_of(self, etype: EventType) -> List[Event]:
        return [ev for ev in self.events if ev.type == etype]

    # start
    def start(self):
        if not self.processes and self.verbose:
            print("No processes to run.")
        self.run()
        for line in format_report(self.processes):
            print(line)

    # main tick loop
    def run(self):
        while self.current_time < self.horizon:
            self.tick()

    def tick(self):
        """Run one tick: admissions, then the continuation check, then the advance pass."""
        arrived = False
        for p in self.processes:
            if p.arrival == self.current_time:
                arrived = True
                self._handle_arrival(p)

        # an arrival already forced a decision this tick
        if not arrived:
            self._check_running()

        self._advance()
        if self.verbose:
            print(f"[t={self.current_time}] {self.scheduler!r}")
        self.current_time += 1

    # handlers
    def _handle_arrival(self, p: Process):
        self.push_event(EventType.PROCESS_ARRIVAL, process=p)
        running = self.scheduler.running
        if running is None:
            self._install(p)
        elif p.priority > running.priority:
            if running.quantum == 0 or running.quantum == self.time_quantum:
                if running.finished:
                    self._retire(running)
                    self.push_event(EventType.REPLACE, process=p, payload={'replaced': running.name})
                else:
                    self.push_event(EventType.PREEMPT, process=p, payload={'preempted': running.name})
                    self.scheduler.enqueue_ready(running)
            else:
                # mid-quantum, even when the running process has already used up its burst
                print(f"context switch|  t:{self.current_time:2d},  P_n:{p.name},  P_r:{running.name}")
                self.push_event(EventType.CONTEXT_SWITCH, process=p,
                                payload={'preempted': running.name, 'quantum': running.quantum})
                self.scheduler.enqueue_ready(running)
            self._install(p)
        else:
            self.scheduler.enqueue_ready(p)

    def _check_running(self):
        running = self.scheduler.running
        if running is None:
            return
        if running.time_left == 0:
            self._retire(running)
            self._dispatch()
        elif running.quantum == self.time_quantum:
            self.push_event(EventType.QUANTUM_EXPIRED, process=running)
            self.scheduler.enqueue_ready(running)
            self._dispatch()

    def _advance(self):
        running = self.scheduler.running
        if running is not None:
            running.quantum += 1
            running.time_left -= 1
            running.turnaround += 1
        for p in self.scheduler:
            p.wait += 1
            p.turnaround += 1

    def _install(self, p: Process):
        self.scheduler.running = p
        p.state = 'RUNNING'
        self.push_event(EventType.DISPATCH, process=p)

    def _dispatch(self):
        p = self.scheduler.dispatch_next()
        if p is not None:
            self.push_event(EventType.DISPATCH, process=p)

    def _retire(self, p: Process):
        p.state = 'EXIT'
        if self.scheduler.running is p:
            self.scheduler.running = None
        self.push_event(EventType.PROCESS_EXIT, process=p, payload={'turnaround': p.turnaround, 'wait': p.wait})
