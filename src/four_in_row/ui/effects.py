from __future__ import annotations
import sys
import time

from four_in_row.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay_sec: float = AI_THINK_DELAY_SEC) -> None:
    """
    Spinner shown before an AI move; the search itself may already take a while.
    """
    if delay_sec <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay_sec)
        return

    frames = "|/-\\"
    deadline = time.monotonic() + delay_sec
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
