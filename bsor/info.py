"""File header and replay metadata block.

Layout at the start of every BSOR file:

  0x00  u32   magic 0x442D3D69 (bytes 69 3D 2D 44)
  0x04  u8    format version, only 1 is understood
  0x05  u8    info section tag 0x00
  0x06  ...   info fields in :class:`Info` order, strings length-prefixed
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from .errors import (
    MagicMismatchError,
    MalformedSectionError,
    NumericParseError,
    UnsupportedVersionError,
)
from .primitives import ByteReader

MAGIC = 0x442D3D69
SUPPORTED_VERSION = 1
INFO_TAG = 0x00

MODIFIER_SEPARATOR = ","

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
TIMESTAMP_MIN = -(2**63)
TIMESTAMP_MAX = 2**63 - 1


@dataclass(frozen=True)
class Info:
    """Replay metadata, fields in wire order."""

    mod_version: str
    game_version: str
    timestamp: int  # Unix seconds, sent as a decimal string

    player_id: str
    player_name: str
    platform: str

    tracking_system: str
    hmd: str
    controller: str

    hash: str
    song_name: str
    mapper: str
    difficulty: str

    score: int
    mode: str
    environment: str
    modifiers: Tuple[str, ...]
    jump_distance: float
    left_handed: bool
    height: float

    start_time: float
    fail_time: float
    song_speed: float


def read_header(reader: ByteReader) -> int:
    """Check the magic number and version byte; return the version."""

    magic = reader.read_u32()
    if magic != MAGIC:
        raise MagicMismatchError(MAGIC, magic)
    version = reader.read_byte()
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)
    return version


def parse_timestamp(text: str) -> int:
    """Parse the decimal timestamp string into a signed 64-bit value."""

    if not _INTEGER_RE.fullmatch(text):
        raise NumericParseError("timestamp", text)
    try:
        value = int(text)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        raise NumericParseError("timestamp", text) from None
    if not TIMESTAMP_MIN <= value <= TIMESTAMP_MAX:
        raise NumericParseError("timestamp", text)
    return value


def parse_modifiers(text: str) -> Tuple[str, ...]:
    """Split the comma separated modifier list, dropping empty runs.

    >>> parse_modifiers("DA,FS")
    ('DA', 'FS')
    >>> parse_modifiers("")
    ()
    """
    return tuple(token for token in text.split(MODIFIER_SEPARATOR) if token)


def read_info(reader: ByteReader) -> Info:
    tag = reader.read_byte()
    if tag != INFO_TAG:
        raise MalformedSectionError("info", INFO_TAG, tag)

    mod_version = reader.read_string()
    game_version = reader.read_string()
    timestamp = parse_timestamp(reader.read_string())
    player_id = reader.read_string()
    player_name = reader.read_string()
    platform = reader.read_string()
    tracking_system = reader.read_string()
    hmd = reader.read_string()
    controller = reader.read_string()
    song_hash = reader.read_string()
    song_name = reader.read_string()
    mapper = reader.read_string()
    difficulty = reader.read_string()
    score = reader.read_i32()
    mode = reader.read_string()
    environment = reader.read_string()
    modifiers = parse_modifiers(reader.read_string())
    jump_distance = reader.read_f32()
    left_handed = reader.read_bool()
    height = reader.read_f32()
    start_time = reader.read_f32()
    fail_time = reader.read_f32()
    song_speed = reader.read_f32()

    return Info(
        mod_version=mod_version,
        game_version=game_version,
        timestamp=timestamp,
        player_id=player_id,
        player_name=player_name,
        platform=platform,
        tracking_system=tracking_system,
        hmd=hmd,
        controller=controller,
        hash=song_hash,
        song_name=song_name,
        mapper=mapper,
        difficulty=difficulty,
        score=score,
        mode=mode,
        environment=environment,
        modifiers=modifiers,
        jump_distance=jump_distance,
        left_handed=left_handed,
        height=height,
        start_time=start_time,
        fail_time=fail_time,
        song_speed=song_speed,
    )
