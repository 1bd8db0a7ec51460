"""Small LRU cache of generated frames."""

from collections import OrderedDict
from typing import List, Tuple

from .field import frame_index
from .params import Params
from .sampler import Dot, generate_dots


class FrameCache:
    """
    Memoizes generate_dots on (params, frame index).

    Times that round to the same frame share one entry. Not thread-safe.
    """

    def __init__(self, max_frames: int = 8):
        if max_frames <= 0:
            raise ValueError("max_frames must be a positive integer")
        self.max_frames = max_frames
        self._frames: "OrderedDict[Tuple[Params, int], List[Dot]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._frames)

    def get(self, params: Params, t: float) -> List[Dot]:
        key = (params, frame_index(t))
        dots = self._frames.get(key)
        if dots is not None:
            self._frames.move_to_end(key)
            return dots

        dots = generate_dots(params, t)
        self._frames[key] = dots
        if len(self._frames) > self.max_frames:
            self._frames.popitem(last=False)
        return dots

    def clear(self) -> None:
        self._frames.clear()
