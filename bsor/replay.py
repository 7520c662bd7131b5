"""Decode a whole BSOR replay into info plus one time-ordered timeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Tuple, Union

from .events import (
    Event,
    EventType,
    read_frames,
    read_heights,
    read_notes,
    read_pauses,
    read_walls,
)
from .info import Info, read_header, read_info
from .primitives import ByteReader

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, BinaryIO]


@dataclass(frozen=True)
class Replay:
    """A decoded replay.

    ``events`` holds every frame, note, wall, height and pause record sorted
    by ``time``.  Records with equal times keep the order they were read in.
    """

    info: Info
    events: Tuple[Event, ...]

    def events_of(self, *kinds: EventType) -> Tuple[Event, ...]:
        wanted = set(kinds)
        return tuple(event for event in self.events if event.kind in wanted)


def assemble_events(*sections: Iterable[Event]) -> Tuple[Event, ...]:
    """Concatenate per-section lists and stable-sort them by time."""

    merged = [event for section in sections for event in section]
    return tuple(sorted(merged, key=lambda event: event.time))


def decode(source: Source) -> Replay:
    """Decode a BSOR replay from bytes or a binary file-like object.

    Raises a :class:`~bsor.errors.DecodeError` subclass for the first
    problem found; nothing is returned for a partially read file.  A
    stream must be opened in binary mode; text input raises ``TypeError``.
    """
    if hasattr(source, "read"):
        data = source.read()
    else:
        data = source
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"expected bytes-like data or a binary stream, got {type(data).__name__}"
        )
    reader = ByteReader(data)

    read_header(reader)
    info = read_info(reader)
    frames = read_frames(reader)
    notes = read_notes(reader)
    walls = read_walls(reader)
    heights = read_heights(reader)
    pauses = read_pauses(reader)

    events = assemble_events(frames, notes, walls, heights, pauses)
    if reader.remaining:
        logger.debug("ignoring %d trailing bytes", reader.remaining)
    logger.debug("decoded replay with %d events", len(events))
    return Replay(info=info, events=events)
