"""Payload type descriptions and fmtp parameter handling."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Optional


class PayloadKind(Enum):
    """The broad kind of media a payload type carries."""

    AUDIO_CONTINUOUS = 0
    AUDIO_PACKETIZED = 1
    VIDEO = 2
    OTHER = 3
    TEXT = 4


class AvpfFeature(IntFlag):
    """RTCP feedback (AVPF) features supported by a payload type."""

    NONE = 0
    FIR = 1
    PLI = 1 << 1
    SLI = 1 << 2
    RPSI = 1 << 3


class PayloadFlag(IntFlag):
    """Flags attached to a payload type."""

    NONE = 0
    ALLOCATED = 1
    RTCP_FEEDBACK_ENABLED = 1 << 1
    IS_VBR = 1 << 2


@dataclass(frozen=True)
class AvpfParams:
    """AVPF parameters: supported features and the regular report interval."""

    features: AvpfFeature = AvpfFeature.NONE
    rpsi_compatibility: bool = False
    trr_interval: int = 0


class ReadOnlyPayloadError(Exception):
    """Raised when modifying a statically defined payload type."""


@dataclass(kw_only=True)
class PayloadType:
    """Description of an RTP payload type.

    Instances created directly are writable; statically defined ones
    (without ``PayloadFlag.ALLOCATED``) must be cloned before changing them.
    """

    kind: PayloadKind = PayloadKind.AUDIO_CONTINUOUS
    clock_rate: int = 0
    bits_per_sample: int = 0
    zero_pattern: Optional[bytes] = None
    pattern_length: int = 0
    normal_bitrate: int = 0
    mime_type: str = ""
    channels: int = 0
    recv_fmtp: Optional[str] = None
    send_fmtp: Optional[str] = None
    avpf: AvpfParams = field(default_factory=AvpfParams)
    flags: PayloadFlag = PayloadFlag.ALLOCATED

    def rtpmap(self) -> str:
        """Return the SDP rtpmap value, e.g. ``PCMU/8000/1``."""
        if self.channels > 0:
            return f"{self.mime_type}/{self.clock_rate}/{self.channels}"
        return f"{self.mime_type}/{self.clock_rate}"

    def clone(self) -> "PayloadType":
        """Return a writable copy of this payload type."""
        return dataclasses.replace(self, flags=self.flags | PayloadFlag.ALLOCATED)

    def _check_writable(self) -> None:
        if not self.flags & PayloadFlag.ALLOCATED:
            raise ReadOnlyPayloadError(
                "Cannot change parameters of statically defined payload types: "
                "make your own copy using clone() first."
            )

    def set_recv_fmtp(self, fmtp: Optional[str]) -> None:
        """Replace the receive format parameters."""
        self._check_writable()
        self.recv_fmtp = fmtp

    def set_send_fmtp(self, fmtp: Optional[str]) -> None:
        """Replace the send format parameters."""
        self._check_writable()
        self.send_fmtp = fmtp

    def append_recv_fmtp(self, fmtp: str) -> None:
        """Append parameters to the receive fmtp, separated by ';'."""
        self._check_writable()
        self.recv_fmtp = fmtp if self.recv_fmtp is None else f"{self.recv_fmtp};{fmtp}"

    def append_send_fmtp(self, fmtp: str) -> None:
        """Append parameters to the send fmtp, separated by ';'."""
        self._check_writable()
        self.send_fmtp = fmtp if self.send_fmtp is None else f"{self.send_fmtp};{fmtp}"

    def set_avpf_params(self, params: AvpfParams) -> None:
        """Replace the AVPF parameters."""
        self._check_writable()
        self.avpf = params


def _find_occurrence(fmtp: str, param: str, start: int) -> int:
    """Find ``param`` from ``start`` where it is not part of a longer name."""
    pos = start
    while True:
        pos = fmtp.find(param, pos)
        if pos < 0:
            return -1
        if pos == start or fmtp[pos - 1] in "; ":
            return pos
        pos += len(param)


def _find_last_occurrence(fmtp: str, param: str) -> int:
    last = -1
    pos = 0
    while True:
        pos = _find_occurrence(fmtp, param, pos)
        if pos < 0:
            return last
        last = pos
        pos += len(param)


def fmtp_get_value(
    fmtp: str, param_name: str, max_length: Optional[int] = None
) -> Optional[str]:
    """Return the value of ``param_name`` in an fmtp line such as ``profile=0;level=10``.

    When the parameter appears several times, the last occurrence wins.
    The value is cut to ``max_length`` characters when given. Returns None
    when the parameter is absent or has no value.
    """
    if not param_name:
        raise ValueError("parameter name must not be empty")
    if max_length is not None and max_length < 0:
        raise ValueError("max_length must not be negative")
    pos = _find_last_occurrence(fmtp, param_name)
    if pos < 0:
        return None
    equal = fmtp.find("=", pos)
    if equal < 0:
        return None
    end = fmtp.find(";", equal + 1)
    if end < 0:
        end = len(fmtp)
    value = fmtp[equal + 1:end]
    if max_length is not None:
        value = value[:max_length]
    return value