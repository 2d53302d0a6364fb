"""
Fixed capacity circular history buffer
"""


class HistoryBuffer:
    """
    Circular buffer that keeps the last `capacity` values.

    `index` always points at the most recently written slot. Unwritten slots
    hold `None`. Slots can be overwritten in place, which the smoother uses
    to backfill interpolated positions.
    """

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.slots = [None] * capacity
        self.index = 0

    def next_index(self, index):
        return (index + 1) % self.capacity

    def previous_index(self, index):
        return (index - 1 + self.capacity) % self.capacity

    def push(self, value):
        """Advance the index and overwrite the oldest slot with a value"""
        self.index = self.next_index(self.index)
        self.slots[self.index] = value

    @property
    def latest(self):
        return self.slots[self.index]

    def recent(self, count):
        """
        Get the newest values, newest first

        Args:
            count: Number of values (at most capacity)

        Returns:
            List of values, possibly containing None for unwritten slots
        """
        values = []
        index = self.index
        for _ in range(min(count, self.capacity)):
            values.append(self.slots[index])
            index = self.previous_index(index)
        return values

    def oldest_first(self):
        """All slots ordered from oldest to newest"""
        start = self.next_index(self.index)
        return [self.slots[(start + i) % self.capacity] for i in range(self.capacity)]

    def clear(self):
        self.slots = [None] * self.capacity
        self.index = 0

    def __getitem__(self, index):
        return self.slots[index]

    def __setitem__(self, index, value):
        self.slots[index] = value

    def __len__(self):
        return self.capacity
