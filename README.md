# rtpstack

Pure-Python building blocks for working with RTP (RFC 3550) media streams:
codec descriptions, the standard audio/video profile, SDP `fmtp` parsing,
jitter estimation, base64 and sliding extremum tracking. It has no
dependencies outside the standard library.

## What is inside

- `rtpstack.payloadtype`
  - `PayloadType`: a codec description (`kind`, `clock_rate`, `channels`,
    `mime_type`, `normal_bitrate`, `recv_fmtp`, `send_fmtp`, `avpf`,
    `flags`, ...). `rtpmap()` gives the SDP rtpmap value, such as
    `PCMU/8000/1`, leaving out the channel count when it is 0.
    `set_recv_fmtp()`, `set_send_fmtp()`, `append_recv_fmtp()`,
    `append_send_fmtp()` (joining with `;`) and `set_avpf_params()` change
    it. A `PayloadType` built directly is writable; one without the
    `PayloadFlag.ALLOCATED` flag, like those of the standard profile, raises
    `ReadOnlyPayloadError` on change, and `clone()` gives a writable copy.
  - `PayloadKind`, `PayloadFlag`, `AvpfFeature` and `AvpfParams`.
  - `fmtp_get_value(fmtp, param_name, max_length=None)`: the value of a
    parameter in an fmtp line such as `profile=0;level=10`, or `None` when
    it is absent or has no `=`. A name only matches at the start of the line
    or after `;` or a space; when it appears more than once, the last
    occurrence wins. The value is cut to `max_length` characters if given.
- `rtpstack.avprofile`
  - `av_profile()`: a new dict mapping the static payload numbers (0 PCMU,
    1, 3 GSM, 4 G723, 7 LPC, 8 PCMA, 9 G722, 10 and 11 L16, 13 CN,
    18 G729, 31 H261, 32 MPV, 34 H263) to read-only payload types. Each call
    returns a fresh dict, so binding extra numbers affects no one else.
  - `find_payload(mime_type, clock_rate)`: the first known payload type with
    that MIME type (compared without regard to case) and clock rate, or
    `None`. Module constants such as `OPUS`, `H264`, `VP8` or `SPEEX_WB`
    name each known type.
- `rtpstack.jitterctl`
  - `JitterControl`: feeds on `new_packet(packet_ts, cur_str_ts)` to
    estimate clock slide and late-packet jitter; in adaptive mode
    (`adaptive = True`) it widens the compensation every 50 packets.
    `update_corrective_slide()`, `update_size(oldest_ts, newest_ts)`,
    `compute_mean_size()` (mean buffer span in milliseconds, then reset) and
    `compensated_timestamp(user_ts)` complete it.
- `rtpstack.b64`
  - `encode(data, line_length=0)`: base64 with CRLF line breaks every
    `line_length` characters (a multiple of 4; 0 means one line).
  - `encoded_length(size, line_length=0)`: the length `encode` produces.
  - `decode(text, stop_on_unknown_char=False, stop_on_unexpected_ws=False)`:
    skips CR/LF always, and other whitespace or unknown characters unless
    told to stop, in which case it raises `B64Error` with `position` and
    `char`. Decoding ends after the first padded chunk.
- `rtpstack.extremum`
  - `Extremum(period)`: the minimum (`record_min`) or maximum
    (`record_max`) of a signal over a sliding period; `current()` gives the
    running value and `previous()` the one of the last finished period.

## Example

```python
from rtpstack.avprofile import av_profile, find_payload
from rtpstack.payloadtype import fmtp_get_value

profile = av_profile()
print(profile[0].rtpmap())                                  # PCMU/8000/1
print(fmtp_get_value("profile=0;level=10", "level", 256))  # 10

opus = find_payload("OPUS", 48000).clone()
opus.append_recv_fmtp("useinbandfec=1")
print(opus.recv_fmtp)                                       # useinbandfec=1
```

## Command line

Extract one parameter from an fmtp line:

```
rtpstack-fmtpparse "profile-level-id=42801F;packetization-mode=1" packetization-mode
```

It prints the value (at most 255 characters), or `No such parameter` on
standard error. With fewer than two arguments it prints its usage and exits
with status 1.

## What it does not do

This package opens no sockets and holds no RTP sessions: it neither sends
nor receives packets, parses no RTP or RTCP headers, and has no scheduler,
event dispatching, logging framework, statistics or network impairment
simulation. `JitterControl` computes the compensation, but keeping a
receive queue of packets is left to the caller.

## Installing and testing

```
pip install .[test]
pytest
```