"""Decoder for BSOR replay files."""

from .errors import (  # noqa: F401
    DecodeError,
    MagicMismatchError,
    MalformedSectionError,
    NumericParseError,
    TruncatedInputError,
    UnsupportedVersionError,
)
from .events import (  # noqa: F401
    FRAME_TAG,
    HEIGHT_TAG,
    NOTE_TAG,
    PAUSE_TAG,
    WALL_TAG,
    CutData,
    Event,
    EventType,
    FrameEvent,
    HeightEvent,
    NoteEvent,
    PauseEvent,
    WallEvent,
    read_frames,
    read_heights,
    read_notes,
    read_pauses,
    read_section,
    read_walls,
)
from .info import (  # noqa: F401
    INFO_TAG,
    MAGIC,
    SUPPORTED_VERSION,
    Info,
    parse_modifiers,
    parse_timestamp,
    read_header,
    read_info,
)
from .primitives import ByteReader, Quaternion, Vector3  # noqa: F401
from .replay import Replay, assemble_events, decode  # noqa: F401
