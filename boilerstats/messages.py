"""Texts shown instead of the short-window chart while the boiler is idle."""

from __future__ import annotations

NIGHT = """
The boiler has been cold for the last 42 minutes. No flame, no draught, no
rising flue gas: just a steel box slowly handing its stored heat back to the
house. The pellets stay in the hopper and the fan stays quiet until the next
operating window opens.

Good night. The readings will pick up again in the morning. 🦉
"""

DAY = """
The boiler has been resting for the last 42 minutes. The water in the loop is
still warm and the radiators keep giving back what they stored earlier, so
the house barely notices the pause.

Nothing to do here: the next burn cycle will show up on this chart. 🦉
"""
