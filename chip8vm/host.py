#!/usr/bin/env python3

"""
Host Loop

Drives a Machine in real time.  Three things happen at three independent
rates:

    * Instructions are stepped at the requested clock speed (or as fast as
      possible if uncapped)
    * Timers are counted down at 60Hz, based on wall-clock time elapsed since
      start, not on the number of instructions executed
    * The display is only redrawn when the Machine says its framebuffer has
      changed, and no more than once per 60Hz frame

Inputs are also polled once per frame, as constantly checking the host event
queue is time consuming.

If the CPU gets lagged, the timers will jump by however many frames were
missed, so they always stay in step with real time.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import TIMER_FREQ

FRAME_INTERVAL = 1.0 / TIMER_FREQ


class Host:
    def __init__(self, machine, renderer, inputs, audio, clock_speed=None):
        self.machine = machine
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.core_interval = None if not clock_speed or clock_speed <= 0 else 1.0 / clock_speed
        self.frames_done = 0
        self.next_frame_time = 0

    def run(self):
        machine = self.machine
        start_time = perf_counter()
        self.frames_done = 0
        self.next_frame_time = start_time

        while True:
            this_time = perf_counter()  # Do this first for maximum precision

            if this_time >= self.next_frame_time:
                if self.inputs.process_messages(machine):
                    return

                self.next_frame_time = this_time + FRAME_INTERVAL

            self.update_timers(this_time - start_time)

            if not self.inputs.is_paused() and machine.awaiting_key is None:
                machine.step()

            if self.core_interval is not None:
                # Wait for next instruction.  Do this last for maximum precision (takes into account time spent on
                # this instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

    def update_timers(self, elapsed):
        # Returns the number of whole 60Hz frames that have just passed
        frames = int(elapsed * TIMER_FREQ) - self.frames_done

        if frames <= 0:
            return 0

        self.frames_done += frames
        machine = self.machine

        if not self.inputs.is_paused():
            machine.tick_timers(frames, frames)

        self.audio.enable_buzzer(machine.st > 0 and not self.inputs.is_paused())

        if machine.should_redraw():
            self.renderer.draw(machine.get_framebuffer())
            machine.clear_redraw()

        return frames
