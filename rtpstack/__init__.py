"""RTP building blocks: payload types, the A/V profile, fmtp parsing, jitter control, base64 and extremum tracking."""

__version__ = "0.1.0"