"""Step-trace engine for animating sorting, graph and tree algorithms."""

from .api import (  # noqa: F401
    trace_algorithm,
    generate_structure,
    default_start,
    delay_for_speed,
    dump_trace,
    trace_to_dict,
)
from .playback import PlaybackCursor  # noqa: F401
from .session import VisualizerSession  # noqa: F401
