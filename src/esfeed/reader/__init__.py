"""Reader – forward cursor over a stream feed."""
from esfeed.reader.stream_reader import ReaderState, StreamReader

__all__ = ["ReaderState", "StreamReader"]
