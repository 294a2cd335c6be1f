from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional

from core.process import Process

class EventType(Enum):
    PROCESS_ARRIVAL = auto()
    DISPATCH = auto()            # ready queue head (or an arrival) takes the CPU
    PREEMPT = auto()             # higher-priority arrival at a quantum boundary
    CONTEXT_SWITCH = auto()      # higher-priority arrival part way through a quantum
    REPLACE = auto()             # higher-priority arrival replaces a finished process
    QUANTUM_EXPIRED = auto()
    PROCESS_EXIT = auto()

@dataclass
class Event:
    time: int
    type: EventType
    process: Optional['Process'] = None
    payload: Any = None

    def __repr__(self):
        return f"Event(time={self.time}, type={self.type}, name={getattr(self.process,'name',None)}, payload={self.payload})"
