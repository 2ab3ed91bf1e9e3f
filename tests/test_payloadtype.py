import pytest

from rtpstack.payloadtype import (
    AvpfFeature,
    AvpfParams,
    PayloadFlag,
    PayloadKind,
    PayloadType,
    ReadOnlyPayloadError,
    fmtp_get_value,
)


def _static_pcmu():
    return PayloadType(
        kind=PayloadKind.AUDIO_CONTINUOUS,
        clock_rate=8000,
        bits_per_sample=8,
        zero_pattern=bytes([127]),
        pattern_length=1,
        normal_bitrate=64000,
        mime_type="PCMU",
        channels=1,
        flags=PayloadFlag.NONE,
    )


def test_rtpmap_with_channels():
    assert _static_pcmu().rtpmap() == "PCMU/8000/1"


def test_rtpmap_without_channels():
    pt = PayloadType(kind=PayloadKind.VIDEO, clock_rate=90000, mime_type="H264")
    assert pt.rtpmap() == "H264/90000"


def test_static_payload_is_read_only():
    pt = _static_pcmu()
    with pytest.raises(ReadOnlyPayloadError):
        pt.set_recv_fmtp("a=1")
    with pytest.raises(ReadOnlyPayloadError):
        pt.append_send_fmtp("a=1")
    with pytest.raises(ReadOnlyPayloadError):
        pt.set_avpf_params(AvpfParams(features=AvpfFeature.FIR))
    assert pt.recv_fmtp is None
    assert pt.send_fmtp is None


def test_clone_is_writable_and_independent():
    original = _static_pcmu()
    copy = original.clone()
    assert copy.flags & PayloadFlag.ALLOCATED
    assert copy.mime_type == original.mime_type
    copy.set_recv_fmtp("mode=30")
    assert copy.recv_fmtp == "mode=30"
    assert original.recv_fmtp is None


def test_append_fmtp():
    pt = PayloadType(mime_type="iLBC", clock_rate=8000)
    pt.append_recv_fmtp("a=1")
    pt.append_recv_fmtp("b=2")
    assert pt.recv_fmtp == "a=1;b=2"
    pt.append_send_fmtp("c=3")
    assert pt.send_fmtp == "c=3"


def test_set_fmtp_none_clears():
    pt = PayloadType(mime_type="opus")
    pt.set_send_fmtp("useinbandfec=1")
    assert pt.send_fmtp == "useinbandfec=1"
    pt.set_send_fmtp(None)
    assert pt.send_fmtp is None


def test_set_avpf_params():
    pt = PayloadType(mime_type="VP8")
    params = AvpfParams(features=AvpfFeature.FIR | AvpfFeature.PLI, trr_interval=5000)
    pt.set_avpf_params(params)
    assert pt.avpf == params


@pytest.mark.parametrize(
    "fmtp, name, expected",
    [
        ("profile=0;level=10", "level", "10"),
        ("profile=0;level=10", "profile", "0"),
        ("a=1;a=2", "a", "2"),
        ("xlevel=3;level=4", "level", "4"),
        ("a=1; b=2", "b", "2"),
        ("profile-level-id=42e01f;packetization-mode=1", "packetization-mode", "1"),
    ],
)
def test_fmtp_get_value_found(fmtp, name, expected):
    assert fmtp_get_value(fmtp, name) == expected


@pytest.mark.parametrize(
    "fmtp, name",
    [
        ("profile=0;level=10", "mode"),
        ("xlevel=3", "level"),
        ("level", "level"),
    ],
)
def test_fmtp_get_value_missing(fmtp, name):
    assert fmtp_get_value(fmtp, name) is None


def test_fmtp_get_value_truncates():
    assert fmtp_get_value("level=12345", "level", 3) == "123"


def test_fmtp_get_value_rejects_empty_name():
    with pytest.raises(ValueError):
        fmtp_get_value("a=1", "")