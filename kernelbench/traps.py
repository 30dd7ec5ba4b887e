"""Per-hart trap dispatch and a machine timer that raises interrupts."""

from __future__ import annotations

from collections.abc import Callable

MIP_MTIP = 1 << 7
DEFAULT_DELTA = 0x100

TrapHandler = Callable[[int, int, int, int], int]


class UnhandledTrap(RuntimeError):
    """A trap arrived on a hart that has no handler installed."""

    def __init__(self, hartid: int, mcause: int) -> None:
        super().__init__(f"unhandled trap on hart {hartid}, mcause {mcause:#x}")
        self.hartid = hartid
        self.mcause = mcause


def _check_hart(hartid: int, num_harts: int) -> None:
    if not 0 <= hartid < num_harts:
        raise ValueError(f"hart {hartid} does not exist")


class TrapDispatcher:
    """Routes each trap to the handler installed for its hart."""

    def __init__(self, num_harts: int = 1) -> None:
        if num_harts < 1:
            raise ValueError("at least one hart is needed")
        self.handlers: list[TrapHandler | None] = [None] * num_harts

    def set_trap_handler(self, hartid: int, handler: TrapHandler | None) -> None:
        """Install ``handler`` for ``hartid``; ``None`` removes it."""
        _check_hart(hartid, len(self.handlers))
        self.handlers[hartid] = handler

    def handle_trap(self, hartid: int, mcause: int, mepc: int, sp: int) -> int:
        """Run the hart's handler and return the address to resume at."""
        _check_hart(hartid, len(self.handlers))
        handler = self.handlers[hartid]
        if handler is None:
            raise UnhandledTrap(hartid, mcause)
        return handler(hartid, mcause, mepc, sp)


class Timer:
    """A shared ``mtime`` counter and one ``mtimecmp`` per hart."""

    NEVER = (1 << 64) - 1

    def __init__(self, num_harts: int = 1) -> None:
        if num_harts < 1:
            raise ValueError("at least one hart is needed")
        self.mtime = 0
        self.mtimecmp = [self.NEVER] * num_harts

    def tick(self, cycles: int = 1) -> None:
        """Advance ``mtime`` by ``cycles``."""
        if cycles < 0:
            raise ValueError("time does not run backwards")
        self.mtime += cycles

    def pending(self, hartid: int) -> bool:
        """Whether the timer interrupt is pending for ``hartid``."""
        _check_hart(hartid, len(self.mtimecmp))
        return self.mtime >= self.mtimecmp[hartid]


class InterruptCounter:
    """Trap handler that counts timer interrupts and re-arms the timer."""

    def __init__(self, timer: Timer, delta: int = DEFAULT_DELTA) -> None:
        if delta <= 0:
            raise ValueError("delta must be positive")
        self.timer = timer
        self.delta = delta
        self.count = 0

    def __call__(self, hartid: int, mcause: int, mepc: int, sp: int) -> int:
        self.count += 1
        while self.timer.pending(hartid):
            self.timer.mtimecmp[hartid] = self.timer.mtime + self.delta
        return mepc