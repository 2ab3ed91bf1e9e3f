"""Jitter estimation and clock-slide compensation for received RTP streams."""

from __future__ import annotations

from typing import Optional

from rtpstack.payloadtype import PayloadType

_BETA = 0.01
_GAMMA = _BETA
_U32 = 0xFFFFFFFF


class JitterControl:
    """Tracks jitter and clock slide between sender and receiver timestamps."""

    def __init__(
        self, base_jitter_time: Optional[int] = None, payload: Optional[PayloadType] = None
    ) -> None:
        self.count = 0
        self.slide = 0
        self.prev_slide = 0
        self.olddiff = 0
        self.jitter = 0.0
        self.inter_jitter = 0.0
        self.cum_jitter_buffer_count = 0
        self.cum_jitter_buffer_size = 0
        self.jitt_comp = 0
        if base_jitter_time is not None and base_jitter_time != -1:
            self.jitt_comp = base_jitter_time
        self.jitt_comp_ts = 0
        self.corrective_step = 0
        self.clock_rate = 8000
        self.adaptive = False
        self.enabled = False
        if payload is not None:
            self.set_payload(payload)
        self.adapt_jitt_comp_ts = self.jitt_comp_ts
        self.corrective_slide = 0

    def set_payload(self, pt: PayloadType) -> None:
        """Convert the compensation time to timestamp units of ``pt``."""
        self.jitt_comp_ts = int((self.jitt_comp / 1000.0) * pt.clock_rate)
        # corrections are made by steps of no less than 10ms
        self.corrective_step = int(0.01 * pt.clock_rate)
        self.adapt_jitt_comp_ts = self.jitt_comp_ts
        self.clock_rate = pt.clock_rate

    def new_packet(self, packet_ts: int, cur_str_ts: int) -> None:
        """Account for a packet with timestamp ``packet_ts`` received at ``cur_str_ts``."""
        diff = (packet_ts & _U32) - (cur_str_ts & _U32)
        if self.count == 0:
            self.slide = self.prev_slide = diff
            slide = float(diff)
            self.olddiff = diff
            self.jitter = 0.0
        else:
            slide = self.slide * (1 - _BETA) + diff * _BETA
        gap = diff - slide
        gap = -gap if gap < 0 else 0.0  # only late packets count
        self.jitter = self.jitter * (1 - _GAMMA) + gap * _GAMMA
        d = diff - self.olddiff
        self.inter_jitter += (abs(d) - self.inter_jitter) / 16.0
        self.olddiff = diff
        self.count += 1
        if self.adaptive:
            if self.count % 50 == 0:
                self.adapt_jitt_comp_ts = int(max(self.jitt_comp_ts, 2 * self.jitter))
            self.slide = int(slide)

    def update_corrective_slide(self) -> None:
        """Move the corrective slide one step toward the measured slide."""
        tmp = int(self.slide - self.prev_slide)
        if tmp > self.corrective_step:
            self.corrective_slide += self.corrective_step
            self.prev_slide = self.slide + self.corrective_step
        elif tmp < -self.corrective_step:
            self.corrective_slide -= self.corrective_step
            self.prev_slide = self.slide - self.corrective_step

    def update_size(self, oldest_ts: int, newest_ts: int) -> None:
        """Record the span of the jitter buffer between its oldest and newest packet."""
        self.cum_jitter_buffer_count += 1
        self.cum_jitter_buffer_size += (newest_ts - oldest_ts) & _U32

    def compute_mean_size(self) -> float:
        """Return the mean buffer span in milliseconds since the last call."""
        if self.cum_jitter_buffer_count == 0:
            return 0.0
        mean = self.cum_jitter_buffer_size / self.cum_jitter_buffer_count
        self.cum_jitter_buffer_size = 0
        self.cum_jitter_buffer_count = 0
        return 1000.0 * mean / self.clock_rate

    def compensated_timestamp(self, user_ts: int) -> int:
        """Map a user timestamp to the compensated stream timestamp."""
        return (user_ts + self.slide - self.adapt_jitt_comp_ts) & _U32