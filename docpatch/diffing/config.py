from ..values import values_equal


class DiffConfig:
    """Set of options for the diff algorithm to pass around"""

    def __init__(self, *, id_aware=False, id_key="id"):
        self.id_aware = id_aware
        self.id_key = id_key

    def items_equal(self, a, b):
        """Whether two array items should be matched up when diffing arrays.

        With id_aware, objects carrying the same id are matched even if
        other members differ, so they get diffed in place.
        """
        return values_equal(a, b, id_aware=self.id_aware, id_key=self.id_key)

    def __copy__(self):
        return DiffConfig(id_aware=self.id_aware, id_key=self.id_key)

    def __repr__(self):
        return "DiffConfig(id_aware={!r}, id_key={!r})".format(self.id_aware, self.id_key)
