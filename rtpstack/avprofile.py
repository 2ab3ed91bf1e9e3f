"""The audio/video RTP profile and the catalogue of well-known payload types."""

from __future__ import annotations

from typing import Dict, Optional

from rtpstack.payloadtype import (
    AvpfFeature,
    AvpfParams,
    PayloadFlag,
    PayloadKind,
    PayloadType,
)

PROFILE_NAME = "AV profile"

_RTCP_DEFAULT_REPORT_INTERVAL = 5000  # milliseconds

_FIR_PLI = AvpfParams(
    features=AvpfFeature.FIR | AvpfFeature.PLI,
    trr_interval=_RTCP_DEFAULT_REPORT_INTERVAL,
)
_FIR_PLI_SLI_RPSI = AvpfParams(
    features=AvpfFeature.FIR | AvpfFeature.PLI | AvpfFeature.SLI | AvpfFeature.RPSI,
    trr_interval=_RTCP_DEFAULT_REPORT_INTERVAL,
)


def _static(
    kind: PayloadKind,
    clock_rate: int,
    normal_bitrate: int,
    mime_type: str,
    channels: int,
    *,
    bits_per_sample: int = 0,
    zero_pattern: Optional[bytes] = None,
    pattern_length: int = 0,
    avpf: AvpfParams = AvpfParams(),
    flags: PayloadFlag = PayloadFlag.NONE,
) -> PayloadType:
    """Build a read-only payload type (one without the ALLOCATED flag)."""
    return PayloadType(
        kind=kind,
        clock_rate=clock_rate,
        bits_per_sample=bits_per_sample,
        zero_pattern=zero_pattern,
        pattern_length=pattern_length,
        normal_bitrate=normal_bitrate,
        mime_type=mime_type,
        channels=channels,
        avpf=avpf,
        flags=flags,
    )


_CONT = PayloadKind.AUDIO_CONTINUOUS
_PKT = PayloadKind.AUDIO_PACKETIZED
_VIDEO = PayloadKind.VIDEO
_TEXT = PayloadKind.TEXT
_VBR = PayloadFlag.IS_VBR
_FEEDBACK = PayloadFlag.RTCP_FEEDBACK_ENABLED

PCMU8000 = _static(_CONT, 8000, 64000, "PCMU", 1, bits_per_sample=8,
                   zero_pattern=bytes([127]), pattern_length=1)
PCMA8000 = _static(_CONT, 8000, 64000, "PCMA", 1, bits_per_sample=8,
                   zero_pattern=bytes([0xD5]), pattern_length=1)
PCM8000 = _static(_CONT, 8000, 128000, "PCM", 1, bits_per_sample=16,
                  zero_pattern=bytes(4), pattern_length=1)
L16_MONO = _static(_CONT, 44100, 705600, "L16", 1, bits_per_sample=16,
                   zero_pattern=bytes(4), pattern_length=2)
L16_STEREO = _static(_CONT, 44100, 1411200, "L16", 2, bits_per_sample=32,
                     zero_pattern=bytes(4), pattern_length=4)
LPC1016 = _static(_PKT, 8000, 2400, "1016", 1)
GSM = _static(_PKT, 8000, 13500, "GSM", 1)
LPC = _static(_PKT, 8000, 5600, "LPC", 1)
G7231 = _static(_PKT, 8000, 6300, "G723", 1)
CN = _static(_PKT, 8000, 8000, "CN", 1)
G729 = _static(_PKT, 8000, 8000, "G729", 1)
G7221 = _static(_PKT, 16000, 24000, "G7221", 1)
G726_40 = _static(_PKT, 8000, 40000, "G726-40", 1)
G726_32 = _static(_PKT, 8000, 32000, "G726-32", 1)
G726_24 = _static(_PKT, 8000, 24000, "G726-24", 1)
G726_16 = _static(_PKT, 8000, 16000, "G726-16", 1)
AAL2_G726_40 = _static(_PKT, 8000, 40000, "AAL2-G726-40", 1)
AAL2_G726_32 = _static(_PKT, 8000, 32000, "AAL2-G726-32", 1)
AAL2_G726_24 = _static(_PKT, 8000, 24000, "AAL2-G726-24", 1)
AAL2_G726_16 = _static(_PKT, 8000, 16000, "AAL2-G726-16", 1)
MPV = _static(_VIDEO, 90000, 256000, "MPV", 0)
H261 = _static(_VIDEO, 90000, 0, "H261", 0)
H263 = _static(_VIDEO, 90000, 256000, "H263", 0)
TRUESPEECH = _static(_PKT, 8000, 8536, "TSP0", 0)

# Extra payload types that can be bound dynamically.
LPC1015 = _static(_PKT, 8000, 2400, "1015", 1)
SPEEX_NB = _static(_PKT, 8000, 8000, "speex", 1, flags=_VBR)
BV16 = _static(_PKT, 8000, 16000, "BV16", 1)
SPEEX_WB = _static(_PKT, 16000, 28000, "speex", 1, flags=_VBR)
SPEEX_UWB = _static(_PKT, 32000, 28000, "speex", 1, flags=_VBR)
ILBC = _static(_PKT, 8000, 13300, "iLBC", 1)
AMR = _static(_PKT, 8000, 12200, "AMR", 1, flags=_VBR)
AMRWB = _static(_PKT, 16000, 23850, "AMR-WB", 1, flags=_VBR)
GSM_EFR = _static(_PKT, 8000, 12200, "GSM-EFR", 1)
MP4V = _static(_VIDEO, 90000, 0, "MP4V-ES", 0, avpf=_FIR_PLI)
EVRC0 = _static(_PKT, 8000, 0, "EVRC0", 1)
EVRCB0 = _static(_PKT, 8000, 0, "EVRCB0", 1)
H263_1998 = _static(_VIDEO, 90000, 256000, "H263-1998", 0)
H263_2000 = _static(_VIDEO, 90000, 0, "H263-2000", 0)
THEORA = _static(_VIDEO, 90000, 256000, "theora", 0)
H264 = _static(_VIDEO, 90000, 256000, "H264", 0, avpf=_FIR_PLI, flags=_FEEDBACK)
X_SNOW = _static(_VIDEO, 90000, 256000, "x-snow", 0)
JPEG = _static(_VIDEO, 90000, 256000, "JPEG", 0)
VP8 = _static(_VIDEO, 90000, 256000, "VP8", 0, avpf=_FIR_PLI_SLI_RPSI, flags=_FEEDBACK)
T140 = _static(_TEXT, 1000, 0, "t140", 0)
T140_RED = _static(_TEXT, 1000, 0, "red", 0)
X_UDPFTP = _static(_PKT, 1000, 0, "x-udpftp", 0)
G722 = _static(_PKT, 8000, 64000, "G722", 1)
SILK_NB = _static(_PKT, 8000, 13000, "SILK", 1, flags=_VBR)
SILK_MB = _static(_PKT, 12000, 15000, "SILK", 1, flags=_VBR)
SILK_WB = _static(_PKT, 16000, 20000, "SILK", 1, flags=_VBR)
SILK_SWB = _static(_PKT, 24000, 30000, "SILK", 1, flags=_VBR)
AACELD_16K = _static(_PKT, 16000, 24000, "mpeg4-generic", 1, flags=_VBR)
AACELD_22K = _static(_PKT, 22050, 32000, "mpeg4-generic", 1, flags=_VBR)
AACELD_32K = _static(_PKT, 32000, 48000, "mpeg4-generic", 1, flags=_VBR)
AACELD_44K = _static(_PKT, 44100, 64000, "mpeg4-generic", 1, flags=_VBR)
AACELD_48K = _static(_PKT, 48000, 64000, "mpeg4-generic", 1, flags=_VBR)
OPUS = _static(_PKT, 48000, 20000, "opus", 2, flags=_VBR)
ISAC = _static(_PKT, 16000, 32000, "iSAC", 1, flags=_VBR)
CODEC2 = _static(_PKT, 8000, 3200, "CODEC2", 1)

_CATALOGUE = (
    PCMU8000, PCMA8000, PCM8000, L16_MONO, L16_STEREO, LPC1016, GSM, LPC,
    G7231, CN, G729, G7221, G726_40, G726_32, G726_24, G726_16,
    AAL2_G726_40, AAL2_G726_32, AAL2_G726_24, AAL2_G726_16, MPV, H261, H263,
    TRUESPEECH, LPC1015, SPEEX_NB, BV16, SPEEX_WB, SPEEX_UWB, ILBC, AMR, AMRWB,
    GSM_EFR, MP4V, EVRC0, EVRCB0, H263_1998, H263_2000, THEORA, H264, X_SNOW,
    JPEG, VP8, T140, T140_RED, X_UDPFTP, G722, SILK_NB, SILK_MB, SILK_WB,
    SILK_SWB, AACELD_16K, AACELD_22K, AACELD_32K, AACELD_44K, AACELD_48K,
    OPUS, ISAC, CODEC2,
)

_STATIC_ASSIGNMENTS = (
    (0, PCMU8000),
    (1, LPC1016),
    (3, GSM),
    (7, LPC),
    (4, G7231),
    (8, PCMA8000),
    (9, G722),
    (10, L16_STEREO),
    (11, L16_MONO),
    (13, CN),
    (18, G729),
    (31, H261),
    (32, MPV),
    (34, H263),
)


def av_profile() -> Dict[int, PayloadType]:
    """Return a fresh mapping of payload numbers to the static AV profile types.

    The mapping is new on each call, so callers may bind extra numbers
    (for instance dynamic ones) without affecting others.
    """
    return dict(_STATIC_ASSIGNMENTS)


def find_payload(mime_type: str, clock_rate: int) -> Optional[PayloadType]:
    """Return the first known payload type with this MIME type and clock rate.

    The MIME type is compared without regard to case. Returns None when no
    known payload type matches.
    """
    wanted = mime_type.casefold()
    return next(
        (
            pt
            for pt in _CATALOGUE
            if pt.mime_type.casefold() == wanted and pt.clock_rate == clock_rate
        ),
        None,
    )