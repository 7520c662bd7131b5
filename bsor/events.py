"""Replay event records and their section decoders.

After the info block come five sections, always in this order.  Each one
starts with a tag byte and a u32 record count:

  0x01  frames   time f32, fps i32, head/left/right pose (vec3 + quat each)
  0x02  notes    id i32, time f32, spawn_time f32, type i32 [+ cut data]
  0x03  walls    id i32, energy f32, time f32, spawn_time f32
  0x04  heights  height f32, time f32
  0x05  pauses   duration i64, time f32

Note records only carry the 15-field cut data block when ``type`` is
GOOD_HIT (0) or BAD_HIT (1); MISS (2) and BOMB (3) records end after the
type field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, List, Optional, TypeVar, Union

from .errors import MalformedSectionError
from .primitives import ByteReader, Quaternion, Vector3

logger = logging.getLogger(__name__)

FRAME_TAG = 0x01
NOTE_TAG = 0x02
WALL_TAG = 0x03
HEIGHT_TAG = 0x04
PAUSE_TAG = 0x05


class EventType(Enum):
    """Event kinds, valued by the tag byte of the section they come from."""

    FRAME = FRAME_TAG
    NOTE = NOTE_TAG
    WALL = WALL_TAG
    HEIGHT = HEIGHT_TAG
    PAUSE = PAUSE_TAG


@dataclass(frozen=True)
class FrameEvent:
    kind: ClassVar[EventType] = EventType.FRAME

    time: float
    fps: int
    head_pos: Vector3
    head_rot: Quaternion
    left_hand_pos: Vector3
    left_hand_rot: Quaternion
    right_hand_pos: Vector3
    right_hand_rot: Quaternion

    @classmethod
    def read(cls, reader: ByteReader) -> "FrameEvent":
        return cls(
            time=reader.read_f32(),
            fps=reader.read_i32(),
            head_pos=reader.read_vector3(),
            head_rot=reader.read_quaternion(),
            left_hand_pos=reader.read_vector3(),
            left_hand_rot=reader.read_quaternion(),
            right_hand_pos=reader.read_vector3(),
            right_hand_rot=reader.read_quaternion(),
        )


@dataclass(frozen=True)
class CutData:
    """Saber swing geometry recorded for a hit note."""

    speed_ok: bool
    direction_ok: bool
    saber_type_ok: bool
    cut_too_soon: bool
    saber_speed: float
    saber_dir: Vector3
    saber_type: int
    time_deviation: float
    cut_dir_deviation: float
    cut_point: Vector3
    cut_normal: Vector3
    cut_dist_to_center: float
    cut_angle: float
    before_cut_rating: float
    after_cut_rating: float

    @classmethod
    def read(cls, reader: ByteReader) -> "CutData":
        return cls(
            speed_ok=reader.read_bool(),
            direction_ok=reader.read_bool(),
            saber_type_ok=reader.read_bool(),
            cut_too_soon=reader.read_bool(),
            saber_speed=reader.read_f32(),
            saber_dir=reader.read_vector3(),
            saber_type=reader.read_i32(),
            time_deviation=reader.read_f32(),
            cut_dir_deviation=reader.read_f32(),
            cut_point=reader.read_vector3(),
            cut_normal=reader.read_vector3(),
            cut_dist_to_center=reader.read_f32(),
            cut_angle=reader.read_f32(),
            before_cut_rating=reader.read_f32(),
            after_cut_rating=reader.read_f32(),
        )


@dataclass(frozen=True)
class NoteEvent:
    kind: ClassVar[EventType] = EventType.NOTE

    GOOD_HIT: ClassVar[int] = 0
    BAD_HIT: ClassVar[int] = 1
    MISS: ClassVar[int] = 2
    BOMB: ClassVar[int] = 3

    id: int
    time: float
    spawn_time: float
    type: int
    cut_data: Optional[CutData] = None

    @property
    def is_hit(self) -> bool:
        return self.type in (self.GOOD_HIT, self.BAD_HIT)

    @classmethod
    def read(cls, reader: ByteReader) -> "NoteEvent":
        note_id = reader.read_i32()
        time = reader.read_f32()
        spawn_time = reader.read_f32()
        note_type = reader.read_i32()
        cut_data = None
        if note_type in (cls.GOOD_HIT, cls.BAD_HIT):
            cut_data = CutData.read(reader)
        return cls(
            id=note_id,
            time=time,
            spawn_time=spawn_time,
            type=note_type,
            cut_data=cut_data,
        )


@dataclass(frozen=True)
class WallEvent:
    kind: ClassVar[EventType] = EventType.WALL

    id: int
    energy: float
    time: float
    spawn_time: float

    @classmethod
    def read(cls, reader: ByteReader) -> "WallEvent":
        return cls(
            id=reader.read_i32(),
            energy=reader.read_f32(),
            time=reader.read_f32(),
            spawn_time=reader.read_f32(),
        )


@dataclass(frozen=True)
class HeightEvent:
    kind: ClassVar[EventType] = EventType.HEIGHT

    height: float
    time: float

    @classmethod
    def read(cls, reader: ByteReader) -> "HeightEvent":
        return cls(height=reader.read_f32(), time=reader.read_f32())


@dataclass(frozen=True)
class PauseEvent:
    kind: ClassVar[EventType] = EventType.PAUSE

    duration: int
    time: float

    @classmethod
    def read(cls, reader: ByteReader) -> "PauseEvent":
        return cls(duration=reader.read_i64(), time=reader.read_f32())


Event = Union[FrameEvent, NoteEvent, WallEvent, HeightEvent, PauseEvent]

E = TypeVar("E", FrameEvent, NoteEvent, WallEvent, HeightEvent, PauseEvent)


def read_section(
    reader: ByteReader,
    name: str,
    tag: int,
    read_record: Callable[[ByteReader], E],
) -> List[E]:
    """Check a section tag, then read ``count`` records with ``read_record``."""

    actual = reader.read_byte()
    if actual != tag:
        raise MalformedSectionError(name, tag, actual)
    count = reader.read_u32()
    records = [read_record(reader) for _ in range(count)]
    logger.debug("read %d %s records ending at offset %d", count, name, reader.offset)
    return records


def read_frames(reader: ByteReader) -> List[FrameEvent]:
    return read_section(reader, "frames", FRAME_TAG, FrameEvent.read)


def read_notes(reader: ByteReader) -> List[NoteEvent]:
    return read_section(reader, "notes", NOTE_TAG, NoteEvent.read)


def read_walls(reader: ByteReader) -> List[WallEvent]:
    return read_section(reader, "walls", WALL_TAG, WallEvent.read)


def read_heights(reader: ByteReader) -> List[HeightEvent]:
    return read_section(reader, "heights", HEIGHT_TAG, HeightEvent.read)


def read_pauses(reader: ByteReader) -> List[PauseEvent]:
    return read_section(reader, "pauses", PAUSE_TAG, PauseEvent.read)
