import pandas as pd

from smartgate.config import HISTORY_CONFIG, RESULT_FIELDS


class HistoryStore:
    """Bounded, append-only list of past gate results"""

    def __init__(self, points=None, capacity=HISTORY_CONFIG['capacity']):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._points = []
        for point in points or []:
            self._points.append(dict(point))
        self._trim()

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    @property
    def next_id(self):
        if not self._points:
            return 1
        return int(self._points[-1].get('id', len(self._points))) + 1

    def append(self, result):
        """Append a result record and return the stored point"""
        point = {'id': self.next_id, **{k: v for k, v in result.items() if k != 'id'}}
        self._points.append(point)
        self._trim()
        return point

    def clear(self):
        self._points = []

    def to_list(self):
        return [dict(p) for p in self._points]

    @classmethod
    def from_list(cls, points, capacity=HISTORY_CONFIG['capacity']):
        """
        Rebuild a history from stored points

        Non-dict entries are dropped. Ids must be ints and strictly increasing.

        Raises:
            ValueError: if the list or its ids are malformed
        """
        if not isinstance(points, list):
            raise ValueError("history must be a list of points")
        points = [p for p in points if isinstance(p, dict)]

        previous = 0
        for point in points:
            point_id = point.get('id')
            if isinstance(point_id, bool) or not isinstance(point_id, int):
                raise ValueError(f"history point id {point_id!r} is not an integer")
            if point_id <= previous:
                raise ValueError(f"history ids are not increasing at {point_id}")
            previous = point_id
        return cls(points, capacity=capacity)

    def to_frame(self):
        """DataFrame indexed by position with an 'id' column and one column per statistic"""
        columns = ['id'] + RESULT_FIELDS
        if not self._points:
            return pd.DataFrame(columns=columns)
        df = pd.DataFrame(self._points)
        for column in columns:
            if column not in df.columns:
                df[column] = None
        df = df[columns]
        for column in RESULT_FIELDS:
            df[column] = pd.to_numeric(df[column], errors='coerce')
        return df

    def _trim(self):
        overflow = len(self._points) - self.capacity
        if overflow > 0:
            del self._points[:overflow]
