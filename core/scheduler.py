# Ready queue and running reference
from collections import deque
from typing import Iterator, Optional

from core.process import Process


class Scheduler:
    def __init__(self, time_quantum: int):
        self.time_quantum = time_quantum
        self.ready_queue: deque[Process] = deque()
        self.running: Optional[Process] = None

    def enqueue_ready(self, process: Process):
        """Insert a process into the ready queue.

        A quantum that has run out is reset first. Then:
        - an empty queue takes the process as its only element
        - a higher priority than the head puts it in front of the head
        - an equal priority puts it in front of the head when it is part way
          through a quantum, or directly behind the head when it is not
        - otherwise the queue is walked from the head while the next entry's
          priority is <= the process's and its quantum is 0, and the process
          is placed after the last entry visited

        Placement is only ever checked against the head and the walk, so the
        queue is not guaranteed to stay sorted by priority.
        """
        if process.quantum >= self.time_quantum:
            process.quantum = 0
        process.state = 'READY'

        if not self.ready_queue:
            self.ready_queue.append(process)
            return
        head = self.ready_queue[0]
        if process.priority > head.priority:
            self.ready_queue.appendleft(process)
        elif process.priority == head.priority:
            if process.quantum != 0:
                self.ready_queue.appendleft(process)
            else:
                self.ready_queue.insert(1, process)
        else:
            nav = 0
            while (nav + 1 < len(self.ready_queue)
                   and self.ready_queue[nav + 1].priority <= process.priority
                   and process.quantum == 0):
                nav += 1
            self.ready_queue.insert(nav + 1, process)

    def has_ready(self) -> bool:
        return bool(self.ready_queue)

    def pick_next(self) -> Optional[Process]:
        if self.ready_queue:
            return self.ready_queue.popleft()
        return None

    def dispatch_next(self) -> Optional[Process]:
        """Install the head of the ready queue as the running process."""
        self.running = self.pick_next()
        if self.running is not None:
            self.running.state = 'RUNNING'
        return self.running

    def __iter__(self) -> Iterator[Process]:
        return iter(self.ready_queue)

    def __len__(self) -> int:
        return len(self.ready_queue)

    def __repr__(self):
        names = ' '.join(p.name for p in self.ready_queue) or '<empty>'
        running = self.running.name if self.running else None
        return f"Scheduler(running={running}, ready=[{names}])"
