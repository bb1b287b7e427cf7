class Vec4:
    """4-component vector. Also used as a matrix row by Mat4.

    Compares by value, so instances are unhashable.
    """

    __hash__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        self.x, self.y, self.z, self.w = x, y, z, w

    def set(self, x, y, z, w):
        self.x, self.y, self.z, self.w = x, y, z, w
        return self

    def zero(self):
        return self.set(0.0, 0.0, 0.0, 0.0)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        if i == 3:
            return self.w
        raise IndexError(f"Vec4 index out of range: {i}")

    def __setitem__(self, i, value):
        if i == 0:
            self.x = value
        elif i == 1:
            self.y = value
        elif i == 2:
            self.z = value
        elif i == 3:
            self.w = value
        else:
            raise IndexError(f"Vec4 index out of range: {i}")

    def __add__(self, other):
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other):
        if isinstance(other, Vec4):
            return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        return Vec4(self.x * other, self.y * other, self.z * other, self.w * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def dot(self, vec4):
        return self.x * vec4.x + self.y * vec4.y + self.z * vec4.z + self.w * vec4.w

    def __repr__(self):
        return f"Vec4{self.to_tuple()!r}"

    def clone(self):
        return Vec4(self.x, self.y, self.z, self.w)

    def to_tuple(self):
        return (self.x, self.y, self.z, self.w)

    def to_array(self):
        return [self.x, self.y, self.z, self.w]
