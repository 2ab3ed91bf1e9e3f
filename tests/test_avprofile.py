import pytest

from rtpstack.avprofile import av_profile, find_payload
from rtpstack.payloadtype import (
    AvpfFeature,
    PayloadFlag,
    PayloadKind,
    ReadOnlyPayloadError,
)


def test_profile_numbers_match_static_assignments():
    profile = av_profile()
    assert sorted(profile) == [0, 1, 3, 4, 7, 8, 9, 10, 11, 13, 18, 31, 32, 34]


@pytest.mark.parametrize(
    "number, mime",
    [(0, "PCMU"), (8, "PCMA"), (3, "GSM"), (18, "G729"), (31, "H261"), (34, "H263")],
)
def test_profile_mime_types(number, mime):
    assert av_profile()[number].mime_type == mime


def test_pcmu_rtpmap_and_zero_pattern():
    pcmu = av_profile()[0]
    assert pcmu.rtpmap() == "PCMU/8000/1"
    assert pcmu.zero_pattern == bytes([127])
    assert pcmu.kind is PayloadKind.AUDIO_CONTINUOUS


def test_pcma_zero_pattern():
    assert av_profile()[8].zero_pattern == bytes([0xD5])


def test_video_rtpmap_has_no_channels():
    assert av_profile()[31].rtpmap() == "H261/90000"


def test_l16_stereo_and_mono():
    profile = av_profile()
    assert profile[10].channels == 2
    assert profile[10].normal_bitrate == 1411200
    assert profile[11].channels == 1
    assert profile[11].normal_bitrate == 705600


def test_profile_is_fresh_each_call():
    first = av_profile()
    first[96] = first[0]
    assert 96 not in av_profile()


def test_static_types_are_read_only():
    pcmu = av_profile()[0]
    with pytest.raises(ReadOnlyPayloadError):
        pcmu.set_recv_fmtp("annexb=no")
    assert pcmu.recv_fmtp is None


def test_clone_of_static_type_is_writable():
    copy = av_profile()[18].clone()
    copy.append_send_fmtp("annexb=no")
    assert copy.send_fmtp == "annexb=no"
    assert copy.flags & PayloadFlag.ALLOCATED
    assert av_profile()[18].send_fmtp is None


def test_find_payload_case_insensitive():
    assert find_payload("pcmu", 8000) is av_profile()[0]


def test_find_payload_distinguishes_clock_rate():
    speex = find_payload("speex", 16000)
    assert speex.clock_rate == 16000
    assert speex.normal_bitrate == 28000
    assert speex.flags & PayloadFlag.IS_VBR


def test_find_payload_unknown():
    assert find_payload("no-such-codec", 8000) is None
    assert find_payload("PCMU", 16000) is None


def test_h264_and_vp8_feedback():
    h264 = find_payload("H264", 90000)
    vp8 = find_payload("VP8", 90000)
    assert h264.flags & PayloadFlag.RTCP_FEEDBACK_ENABLED
    assert h264.avpf.features == AvpfFeature.FIR | AvpfFeature.PLI
    assert vp8.avpf.features & AvpfFeature.RPSI
    assert vp8.avpf.trr_interval == h264.avpf.trr_interval


def test_opus_is_stereo():
    opus = find_payload("opus", 48000)
    assert opus.rtpmap() == "opus/48000/2"


def test_every_profile_entry_is_findable():
    for pt in av_profile().values():
        found = find_payload(pt.mime_type, pt.clock_rate)
        assert found.mime_type == pt.mime_type
        assert found.clock_rate == pt.clock_rate