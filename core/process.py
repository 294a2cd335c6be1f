class Process:
    """A process record: static input data plus the counters the loop mutates."""

    def __init__(self, name: str, priority: int, burst: int, arrival: int):
        self.name = name
        self.priority = priority
        self.burst = burst
        self.arrival = arrival
        self.time_left = burst
        self.turnaround = 0
        self.wait = 0
        self.quantum = 0  # consecutive ticks run since last (re)scheduled
        self.state = 'NEW'

    @property
    def finished(self) -> bool:
        return self.time_left <= 0

    @property
    def cpu_time_executed(self) -> int:
        return self.burst - self.time_left

    def __repr__(self) -> str:
        return (f"Process({self.name}, prio={self.priority}, state={self.state}, "
                f"left={self.time_left}, q={self.quantum}, ta={self.turnaround}, wait={self.wait})")
