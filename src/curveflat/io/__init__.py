"""Font I/O for curveflat.

This module connects the flattening core to fontTools:

- FlatteningPen: fontTools pen replacing curves with flattened lines
- recording_to_polylines: RecordingPen value to point lists
- FontReader: Load a TTF/OTF font and flatten glyphs by name
"""

from curveflat.io.pen import FlatteningPen, recording_to_polylines
from curveflat.io.reader import FontReader

__all__ = [
    "FlatteningPen",
    "FontReader",
    "recording_to_polylines",
]
